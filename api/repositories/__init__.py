"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved: JSON documents on local
disk for the record collections, SQL for the user profile table.
Services and routers depend on these adapters rather than touching files or
sessions directly.
"""
