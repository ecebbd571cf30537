"""
Catalog client: an in-memory mirror of the product collection with
client-side search, sorting and pagination over the product REST API.
"""
