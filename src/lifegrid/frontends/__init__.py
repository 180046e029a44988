"""Frontend interfaces for the Game of Life.

``lifegrid.frontends.cli`` is the terminal frontend and
``lifegrid.frontends.tkinter_gui`` the windowed one. Neither is imported
here, so each can be run with ``python -m`` and the CLI works on
interpreters built without Tk.
"""
