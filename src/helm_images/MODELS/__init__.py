"""
Typed models of the manifests images are extracted from, and of the result.
"""
