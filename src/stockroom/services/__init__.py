"""Services package - inventory logic for Stockroom.

Architecture:
- Repository: pass-through CRUD against Supabase (production) or SQLite
  (development), see repository.py
- Collection cache: full refetch after every mutation
- Filter/sort and pagination: pure functions and immutable windows
- Inventory controller: immutable view state and the update cycle driven by
  the UI
- Exceptions: consistent error handling via the ServiceError hierarchy

Service Modules:
- collection_service: fetch and item CRUD
- filter_service: search, filters and sort orders
- pagination: "Load more" windows
- quantity_service: add/subtract adjustments
- form_controller: create/edit drafts and submissions
- inventory_controller: per-tab view state and actions
- export_service: PDF export
- auth_service: Supabase email/password authentication
- image_service: item image validation and upload

Modules are imported directly (e.g. ``from stockroom.services import
quantity_service``); nothing is re-exported here.
"""
