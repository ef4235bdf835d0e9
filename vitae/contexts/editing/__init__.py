"""
Editing Context

Responsibilities:
- Translates user input into single-field patches against the Record Store
- Adds, removes and updates entries of repeatable collections by id
- Parses the delimited skills field and merges suggested skills
- Requests suggestions and keeps their errors local to the editor

Owns: Patch computation, transient editor state (hint, error, in-flight flag)
Never: Holds durable state or renders the résumé
"""

from vitae.contexts.editing.editors import (
    CollectionEditor,
    IdentityEditor,
    SkillsEditor,
    SuggestionOutcome,
    SummaryEditor,
)
from vitae.contexts.editing.patches import (
    append_entry,
    format_skills,
    merge_skills,
    parse_skills,
    remove_entry,
    remove_skill_at,
    update_entry,
)

__all__ = [
    # Editors
    "CollectionEditor",
    "IdentityEditor",
    "SummaryEditor",
    "SkillsEditor",
    "SuggestionOutcome",
    # Pure patch helpers
    "append_entry",
    "remove_entry",
    "update_entry",
    "parse_skills",
    "format_skills",
    "remove_skill_at",
    "merge_skills",
]
