# Repositories package init
"""
Posts API — Persistence Layer
===============================

What:  Generic repository abstraction between services and the database.
How:   `Repository` declares the storage capabilities the services rely on;
       `SQLAlchemyRepository` implements them over one AsyncSession.

Repository Inventory:
    - Repository (abstract): save, find_by_id, find_all, find_page, delete_by_id, count
    - SQLAlchemyRepository: async SQLAlchemy implementation for any mapped model
    - PostRepository: SQLAlchemyRepository bound to the Post model
"""
