"""
Prompts sent to upstream providers.
"""

ASK_SYSTEM_PROMPT = (
    "You are a concise technical assistant for a portfolio site. "
    "Only use the provided album context. If unknown, say so briefly."
)

ASK_USER_TEMPLATE = (
    "Album context:\n{context}\n\n"
    "Question: {question}\n"
    "Answer in 2–6 sentences with concrete details if present."
)

CAPTION_SYSTEM_PROMPT = "Describe the image in one concise sentence. Avoid opinions; be specific."
CAPTION_USER_PROMPT = "Describe this image in one sentence."

TAGS_SYSTEM_PROMPT = "Return 3–6 comma-separated tags. Use short, concrete nouns/adjectives only."
TAGS_USER_TEMPLATE = "Caption: {caption}\nReturn only tags."
