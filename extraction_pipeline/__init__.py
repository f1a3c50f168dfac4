"""
Channel Video Extractor - extraction pipeline
"""
