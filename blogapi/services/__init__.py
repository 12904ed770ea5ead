"""
High-level use cases for the blog API.

Each service validates caller input and orchestrates repositories. Routers
call these services instead of touching sessions directly.
"""
