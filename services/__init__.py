"""
services/ - Business Logic Layer
================================
Multi-step operations that span several repositories. Each one owns its
transaction so the steps succeed or fail together.
"""
