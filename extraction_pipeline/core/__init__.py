"""
Core services of the extraction pipeline
"""
