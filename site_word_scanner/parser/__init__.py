"""site_word_scanner.parser: разбор HTML и поиск вхождений ключевого слова."""

from site_word_scanner.parser.html_parser import ParsedPage, parse_html
from site_word_scanner.parser.occurrences import Occurrences, extract_occurrences

__all__ = ["Occurrences", "ParsedPage", "extract_occurrences", "parse_html"]
