"""
Human-editable prompt templates for issue suggestion.
Edit the templates below to modify AI behavior.
"""

from ..github_client.models import RepositoryIdentifier

# ruff: noqa: E501

SUGGESTION_PROMPT_TEMPLATE = """
I have a GitHub repository at: {repository_url}

Please analyze this repository.
1. Use Google Search to understand what this repository does, its main technologies, and if there are any common known issues or missing obvious features.
2. Search specifically for "issues site:github.com/{owner}/{name}" to see existing problems.
3. {third_step}
{specific_instructions}
For each suggestion, provide:
- A clear, professional Title.
- A very detailed Body in GitHub-flavored Markdown.
- The type of issue (Bug, Feature, Refactor, Documentation).
- A short reasoning.
"""

THREE_ISSUES_STEP = "Suggest exactly 3 distinct issues that could be created for this repository."

TODO_SCAN_STEP = "Search for TODO/FIXME/HACK comments in the code as requested."

GOALS_INSTRUCTION = """
The user has specified the following Project Goals: "{goals}". Please ensure at least one suggested issue aligns directly with these goals.
"""

TODO_SCAN_INSTRUCTION = """
CRITICAL INSTRUCTION: The user wants to scan for existing TODOs. Use Google Search to specifically look for "TODO", "FIXME" or "HACK" comments in the repository code (e.g. search query 'site:github.com/{owner}/{name} "TODO"'). If you find relevant TODOs, prioritize creating an issue to resolve them.
"""

OUTPUT_FORMAT_INSTRUCTION = """
IMPORTANT OUTPUT FORMAT:
You must return a single valid JSON array and nothing else.
Each element must have exactly these fields: "title", "body", "type", "reasoning".
"type" must be one of: "Bug", "Feature", "Refactor", "Documentation".
Do not wrap the JSON in markdown code blocks.
Start the response with '[' and end with ']'.

Example:
[
  {
    "title": "Example Title",
    "body": "Example Body",
    "type": "Feature",
    "reasoning": "Reasoning here"
  }
]
"""


def build_prompt(
    repository: RepositoryIdentifier,
    repository_url: str,
    goals: str | None = None,
    scan_todos: bool = False,
) -> str:
    """Compose the suggestion prompt for a repository.

    The result depends only on the arguments, so identical inputs always
    produce byte-identical prompts.

    Args:
        repository: Parsed repository identifier
        repository_url: URL exactly as the user entered it
        goals: Optional free-text project goals; ignored when blank
        scan_todos: Ask the model to hunt for TODO/FIXME/HACK markers

    Returns:
        Prompt text for the suggestion agent
    """
    specific_instructions = ""

    if goals and goals.strip():
        specific_instructions += GOALS_INSTRUCTION.format(goals=goals)

    if scan_todos:
        specific_instructions += TODO_SCAN_INSTRUCTION.format(
            owner=repository.owner, name=repository.name
        )

    prompt = SUGGESTION_PROMPT_TEMPLATE.format(
        repository_url=repository_url,
        owner=repository.owner,
        name=repository.name,
        third_step=TODO_SCAN_STEP if scan_todos else THREE_ISSUES_STEP,
        specific_instructions=specific_instructions,
    )

    return prompt + OUTPUT_FORMAT_INSTRUCTION
