"""renderconv: convert renderer output to PNG stills and a looping GIF."""

__version__ = "0.1.0"
