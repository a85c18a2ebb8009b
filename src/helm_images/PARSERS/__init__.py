"""
Parsers for rendered manifest text.
"""
