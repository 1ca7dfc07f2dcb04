"""Instruction templates sent to the multimodal models.

Contains:
- VARIATION_BASE_INSTRUCTION: prefix applied to every catalog prompt
- VARIATION_SYSTEM_INSTRUCTION / VARIATION_USER_SUFFIX: image model messages
- DESCRIPTION_SYSTEM_INSTRUCTION / DESCRIPTION_INSTRUCTION_LINES: copywriting
- DESCRIPTION_RESPONSE_FORMAT: JSON schema for the three descriptions
"""

# Template placeholders: {name}, {prompt}
VARIATION_BASE_INSTRUCTION = (
    "Create product variations of the provided reference image. Treat the upload as "
    "authoritative: preserve the product's silhouette, materials, colours, and branding. "
    "Do not introduce alternate products, packaging, or text overlays. Maintain garment accuracy."
)

VARIATION_TEMPLATE = "{base} Apply the {name} styling: {prompt}"

VARIATION_SYSTEM_INSTRUCTION = (
    "You are an e-commerce photo retoucher. Use the supplied reference image as the "
    "definitive product. Preserve its silhouette, materials, colours, and branding. Only "
    "adjust camera angle, lighting, background, or lightweight supporting props. Return "
    "exactly one finished image."
)

VARIATION_USER_SUFFIX = (
    "Use the provided reference image as the base. Preserve the product's silhouette, "
    "materials, colours, and branding. Do not introduce alternative products, new logos, "
    "or any text overlays."
)

DESCRIPTION_SYSTEM_INSTRUCTION = (
    "You are a product marketing copywriter. Ground every description in the supplied "
    "product photo and optional prompt cues. Focus on sensory appeal, visual cues, and "
    "emotional benefits."
)

# Line placeholder: {cues}
STYLING_CUES_LINE = "Reference styling cues: {cues}."

NO_CUES_LINE = (
    "Describe the product exactly as it appears in the reference photo, highlighting "
    "colour, materials, finish, and likely use context."
)

DESCRIPTION_INSTRUCTION_HEADER = (
    "Use the attached product reference photo to craft three concise, "
    "conversion-oriented e-commerce descriptions."
)

DESCRIPTION_INSTRUCTION_LINES = [
    "Each description must include:",
    "- A short headline (max 10 words).",
    "- A tagline (max 15 words). Use an empty string if it is not needed.",
    "- A body paragraph (max 120 words) written for online shopping.",
    "Base every claim on visual evidence from the image or the selected prompt cues. "
    "Do not invent specifications you cannot verify.",
    "Write in clear, modern US English and keep each description distinct.",
]

MISSING_IMAGE_NOTE = (
    "The photo reference could not be attached; describe the product using only the prompt cues."
)

DESCRIPTION_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "product_descriptions",
        "schema": {
            "type": "object",
            "properties": {
                "descriptions": {
                    "type": "array",
                    "minItems": 3,
                    "maxItems": 3,
                    "items": {
                        "type": "object",
                        "required": ["headline", "tagline", "body", "tone"],
                        "properties": {
                            "headline": {"type": "string"},
                            "tagline": {"type": "string"},
                            "body": {"type": "string"},
                            "tone": {"type": "string"},
                        },
                        "additionalProperties": False,
                    },
                },
            },
            "required": ["descriptions"],
            "additionalProperties": False,
        },
    },
}
