from .blocks import Block, ExtractedFile, InputLine

__all__ = ["InputLine", "Block", "ExtractedFile"]
