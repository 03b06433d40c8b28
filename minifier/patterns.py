"""
Pattern Recognizers Module
Line-scoped regular expressions that find CSS class names in markup,
stylesheet and script source.
"""

import re
from typing import List

# class="a b", class='a b' or class=a; the match ends at the closing quote
HTML_CLASS_RE = re.compile(r'class\s*=\s*(?:"([^"]*)"|\'([^\']*)\'|([^\s"\'>]+))')

# .identifier inside a selector; pseudo-classes stop at the colon
CSS_CLASS_RE = re.compile(r'\.([a-zA-Z_][\w-]*)')

JS_QUERY_SELECTOR_RE = re.compile(
    r'(?P<head>querySelector(?:All)?\(\s*["\'])'
    r'(?P<selector>\.[\w\s.-]+)'
    r'(?P<tail>["\']\s*\))'
)

# Each .segment of a querySelector argument
SELECTOR_CLASS_RE = re.compile(r'\.([\w-]+)')

JS_CLASS_LIST_RE = re.compile(
    r'(?P<head>classList\.(?:add|remove|toggle)\()'
    r'(?P<args>\s*["\'][\w\s-]+["\'](?:\s*,\s*["\'][\w\s-]+["\'])*\s*)'
    r'(?P<tail>\))'
)

JS_CLASS_NAME_RE = re.compile(r'className\s*=\s*["\']([^"\'\s]+(?:\s+[^"\'\s]+)*)["\']')


def split_class_list_args(args: str) -> List[str]:
    """Split the inside of a classList call into bare class names."""
    return [arg.strip().strip('"\'').strip() for arg in args.split(',')]


def attribute_value(match: re.Match) -> str:
    """Return the class list of an HTML_CLASS_RE match, whichever quoting it used."""
    return next(value for value in match.groups() if value is not None)


def extract_html_classes(line: str) -> List[str]:
    classes = []
    for match in HTML_CLASS_RE.finditer(line):
        classes.extend(attribute_value(match).split())
    return classes


def extract_css_classes(line: str) -> List[str]:
    return [match.group(1) for match in CSS_CLASS_RE.finditer(line)]


def extract_query_selector_classes(line: str) -> List[str]:
    classes = []
    for match in JS_QUERY_SELECTOR_RE.finditer(line):
        classes.extend(SELECTOR_CLASS_RE.findall(match.group('selector')))
    return classes


def extract_class_list_classes(line: str) -> List[str]:
    classes = []
    for match in JS_CLASS_LIST_RE.finditer(line):
        classes.extend(split_class_list_args(match.group('args')))
    return classes


def extract_class_name_classes(line: str) -> List[str]:
    classes = []
    for match in JS_CLASS_NAME_RE.finditer(line):
        classes.extend(match.group(1).split())
    return classes


def extract_js_classes(line: str) -> List[str]:
    """
    Extract class names from the three script idioms.

    Results are grouped by idiom (querySelector, classList, className),
    each group in left-to-right order.
    """
    return (
        extract_query_selector_classes(line)
        + extract_class_list_classes(line)
        + extract_class_name_classes(line)
    )
