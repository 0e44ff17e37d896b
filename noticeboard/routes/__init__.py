# Routes package init
"""
Notice Board — API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notices.py: GET / POST      {prefix}/
                  GET / PUT / DELETE {prefix}/{id}
    - health.py:  GET /health

Routes are thin: they extract request data, call NoticeService, and let
the global exception handlers format failures.
"""
