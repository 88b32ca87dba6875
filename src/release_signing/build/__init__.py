"""
Build package for release-signing.

Contains the signing configuration loader and the invoke tasks built on it.
"""
