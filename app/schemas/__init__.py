"""
Request/response schemas
"""
