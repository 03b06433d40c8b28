"""
Rewriter Module
Replaces recognized class names in a single line, leaving all other text
byte-for-byte intact. Each rewriter mirrors a recognizer in patterns.py.
"""

from typing import Dict, List

from .patterns import (
    HTML_CLASS_RE,
    CSS_CLASS_RE,
    JS_QUERY_SELECTOR_RE,
    SELECTOR_CLASS_RE,
    JS_CLASS_LIST_RE,
    JS_CLASS_NAME_RE,
    attribute_value,
    split_class_list_args,
)


def unique_classes(classes: List[str]) -> List[str]:
    """Drop repeated classes, keeping first occurrence order."""
    seen = set()
    unique = []
    for cls in classes:
        if cls not in seen:
            seen.add(cls)
            unique.append(cls)
    return unique


def rewrite_html_line(line: str, class_map: Dict[str, str], suppress_duplicates: bool = True) -> str:
    """Rebuild every class attribute as class="<mapped tokens>"."""
    def repl(match):
        classes = [class_map.get(cls, cls) for cls in attribute_value(match).split()]
        if suppress_duplicates:
            classes = unique_classes(classes)
        return 'class="' + ' '.join(classes) + '"'

    return HTML_CLASS_RE.sub(repl, line)


def rewrite_css_line(line: str, class_map: Dict[str, str]) -> str:
    def repl(match):
        return '.' + class_map.get(match.group(1), match.group(1))

    return CSS_CLASS_RE.sub(repl, line)


def _rewrite_query_selectors(line: str, class_map: Dict[str, str]) -> str:
    def repl_segment(match):
        return '.' + class_map.get(match.group(1), match.group(1))

    def repl(match):
        selector = SELECTOR_CLASS_RE.sub(repl_segment, match.group('selector'))
        return match.group('head') + selector + match.group('tail')

    return JS_QUERY_SELECTOR_RE.sub(repl, line)


def _rewrite_class_lists(line: str, class_map: Dict[str, str]) -> str:
    def repl(match):
        args = ['"' + class_map.get(cls, cls) + '"' for cls in split_class_list_args(match.group('args'))]
        return match.group('head') + ', '.join(args) + match.group('tail')

    return JS_CLASS_LIST_RE.sub(repl, line)


def _rewrite_class_names(line: str, class_map: Dict[str, str]) -> str:
    def repl(match):
        classes = [class_map.get(cls, cls) for cls in match.group(1).split()]
        return "className = '" + ' '.join(classes) + "'"

    return JS_CLASS_NAME_RE.sub(repl, line)


def rewrite_js_line(line: str, class_map: Dict[str, str]) -> str:
    """Apply the querySelector, classList and className rewrites in turn."""
    line = _rewrite_query_selectors(line, class_map)
    line = _rewrite_class_lists(line, class_map)
    return _rewrite_class_names(line, class_map)
