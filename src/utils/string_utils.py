import math


WORDS_PER_MINUTE = 200


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def count_words(text: str) -> int:
    return len(text.split()) if text else 0


def reading_time_seconds(word_count: int) -> int:
    if not word_count:
        return 0
    return math.ceil(word_count / WORDS_PER_MINUTE * 60)
