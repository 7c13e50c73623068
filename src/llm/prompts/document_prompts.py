"""
Image prompts - receipts and signboards.

The image itself is sent as an inline part next to the prompt text.
"""

EXPENSE_TYPES = ("Travel", "Food", "Hotel", "Tickets", "Misc")


def get_expense_parser_prompt() -> str:
    categories = ", ".join(f'"{t}"' for t in EXPENSE_TYPES)

    return f"""You are an expert at reading and interpreting receipts and bills for tourism management.

Analyze the provided image of a bill or receipt. Identify the type of expense, the total amount, and the date.

Categorize the expense into one of the following types: {categories}.

Extract the following information for each expense found and return it in a structured format:
- Expense Type
- Total Amount (as a number)
- Date (in YYYY-MM-DD format)

The bill to analyze is attached."""


def get_transliteration_prompt(target_language: str) -> str:
    return f"""You are an expert Optical Character Recognition (OCR) and transliteration engine.

Your task is to perform two steps:
1. Accurately extract all text from the provided image.
2. Transliterate the extracted text into the script of the target language: {target_language}.

For example, if the extracted text is "தமிழ்நாடு" and the target language is "Hindi", the output should be "तमिलनाडु". If the target language is "English", the output should be "TAMIL NADU".

Return only the final transliterated text in the extractedText field.

The image to analyze is attached."""
