"""
Batch extraction over rendered manifest streams.
"""
