"""
FastAPI routers grouped by domain (record collections, loan datasets, users, uploads).

Each file inside this package exposes APIRouter objects that are included in
the main application (app.py).
"""
