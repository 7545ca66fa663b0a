import re
from typing import Pattern, List

API_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
INGREDIENTS_LIMIT = 20

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed"
YOUTUBE_ID_PATTERNS: List[Pattern[str]] = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"^([a-zA-Z0-9_-]{11})$"),
]
YOUTUBE_ID_LENGTH = 11

LINE_BREAK_RE = re.compile(r"\r?\n")

BUTTON_ID = "btn-random-meal"
CONTAINER_ID = "meal-container"
LOADED_CLASS = "meal--loaded"

LOADING_TEXT = "Carregando receita…"
ERROR_HINT = "Verifique sua conexão e tente novamente."
FALLBACK_ERROR_MESSAGE = "Erro ao carregar a receita"
EMPTY_RESULT_MESSAGE = "Nenhuma refeição retornada pela API"
MISSING_ELEMENTS_MESSAGE = "Elementos necessários não encontrados no DOM"
