PROMPT_TEMPLATE = (
    "Generate code for: {description}\n"
    "Provide ONLY the raw code without any markdown formatting, backticks, "
    "or language identifiers. Do not include any explanations or comments."
)


def build_prompt(description: str) -> str:
    # description goes in verbatim, no trimming
    return PROMPT_TEMPLATE.format(description=description)


def build_request_body(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}
