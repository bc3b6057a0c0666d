"""
Feature modules for the blog backend.

- auth: accounts, password hashing, identity tokens
- posts: ownership-checked post CRUD

A module keeps its protocols in interfaces.py and its storage behind
repository.py. Other code imports the protocols and models; the concrete
classes are wired up in api.dependencies.
"""
