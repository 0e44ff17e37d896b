# Services package init
"""
Notice Board — Services Layer
===============================

What:  Business logic between routes (HTTP) and the notice collection
       (persistence).
How:   Services accept a session and validated request schemas, run one
       collection operation, and return response schemas.

Service Inventory:
    - NoticeService: list / get / create / update / delete notices
"""
