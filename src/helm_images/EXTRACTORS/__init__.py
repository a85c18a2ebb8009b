"""
Per-kind image extractors and the registry that selects them.
"""
