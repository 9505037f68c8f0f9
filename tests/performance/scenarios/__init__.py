"""
Locust scenario user classes.

- :mod:`.base` — abstract user that picks up the shared team seed
- :mod:`.pr_create` — pull-request creation with reviewer checks
"""
