# UI package init
"""
Notice Board — Terminal UI Package
====================================

What:  The three board screens and the pieces they share.

Module Inventory:
    - navigation.py: Navigator (routes `/`, `/create`, `/note/<id>`)
    - toast.py:      Toaster (transient success/error notifications)
    - views.py:      BoardView, CreateView, DetailView state machines
    - render.py:     rich renderables for cards, the board and the detail page
    - app.py:        BoardApp, the InquirerPy prompt loop tying it together

Views hold state and talk to the API client; they never prompt or print.
BoardApp does all terminal I/O, which keeps the views testable with a fake
client.
"""
