"""
Use cases for the records API.

Each service module orchestrates repositories/adapters: the collection
registry for the JSON files, user profile flows against the SQL store and the
simulated document upload.

Routers (FastAPI endpoints) call these services instead of manipulating
files or sessions directly.
"""
