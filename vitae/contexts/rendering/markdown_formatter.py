"""
Markdown Utilities

Helper functions for formatting a résumé layout as markdown, used for terminal
previews. Reads the same layout tree as the HTML renderers, so section
inclusion and field selection are identical.
"""

from typing import Dict

from vitae.contexts.rendering.layout import LayoutEntry, LayoutSection, ResumeLayout, SectionKind

DEFAULT_HEADINGS = {
    SectionKind.SUMMARY.value: "Summary",
    SectionKind.SKILLS.value: "Skills",
    SectionKind.EXPERIENCE.value: "Experience",
    SectionKind.PROJECTS.value: "Projects",
    SectionKind.EDUCATION.value: "Education",
}


def format_entry_markdown(entry: LayoutEntry) -> str:
    """
    Format a single list entry as markdown.

    Title is formatted as ### with the trailing text (dates, role) after a
    pipe. Subtitle, details and body follow as plain lines.
    """
    heading = f"### {entry.title}"
    if entry.trailing:
        heading += f" | *{entry.trailing}*"
    parts = [heading]

    if entry.subtitle:
        parts.append(f"**{entry.subtitle}**")
    for detail in entry.details:
        parts.append(f"{detail.label}: {detail.value}")
    if entry.body:
        parts.append("")
        parts.append(entry.body)

    return "\n".join(parts)


def format_section_markdown(section: LayoutSection, heading: str) -> str:
    parts = [f"## {heading}\n"]

    if section.text:
        parts.append(section.text)

    # Column order is preserved: left column first, then right
    for column in section.columns:
        for skill in column:
            parts.append(f"- {skill}")

    for entry in section.entries:
        parts.append(format_entry_markdown(entry))
        parts.append("")

    return "\n".join(parts).rstrip()


def format_layout_markdown(layout: ResumeLayout, headings: Dict[str, str] = None) -> str:
    """
    Format a complete layout as markdown.

    Args:
        layout: Output of build_layout()
        headings: Optional section titles keyed by SectionKind value
                  (e.g., a theme's "headings" mapping)

    Returns:
        Markdown document: # name, role and contacts, then one ## per section
    """
    if headings is None:
        headings = DEFAULT_HEADINGS

    header = layout.header
    parts = [f"# {header.name}"]
    if header.role:
        parts.append(f"*{header.role}*")
    if header.contacts:
        parts.append(" | ".join(contact.text for contact in header.contacts))

    for section in layout.sections:
        parts.append("")
        parts.append(format_section_markdown(section, headings[section.kind.value]))

    return "\n".join(parts) + "\n"
