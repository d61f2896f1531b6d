"""
SQLAlchemy models and the store that queries them
"""
