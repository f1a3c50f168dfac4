"""
Shared services for the Channel Video Extractor
"""
