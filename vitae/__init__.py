"""
VITAE - Visual Interactive Tool for Assembling Employment records

A résumé builder organised around a single editable document that is projected
live into one of two visual themes, persisted across sessions, and exported to a
printable PDF. An optional LLM call suggests skills or a summary paragraph.

Architecture:
- Document Context: The résumé record, its durable storage, and the Record Store
- Editing Context: Section editors that turn user input into patches
- Suggestion Context: LLM-backed skill and summary suggestions
- Rendering Context: Shared layout traversal, two HTML themes, PDF export
- Session Context: Sector state machine, re-render loop, export guard
"""

__version__ = "0.1.0"
