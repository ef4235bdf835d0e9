"""Prompt templates for the suggestion service."""

SKILLS_PROMPT = (
    "List the top {count} essential technical and soft skills for a {role} in 2025. "
    "Return only the skills separated by commas, no explanations or additional text."
)

SUMMARY_PROMPT = (
    "Using the following key points, write a professional personal summary for a resume "
    "in 3-4 sentences. Make it compelling and highlight the person's strengths and "
    "achievements: {hints}"
)
