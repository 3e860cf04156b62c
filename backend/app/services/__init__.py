"""
Flavorbase Backend: Services Package
======================================

What:  Data access for the resource handlers.

Service Inventory:
    - repository.py: Repository, the per-model data access facade
                     (find_one, find_all, count, create, update, destroy)
"""
