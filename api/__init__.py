"""
CostLens REST API.
"""
