"""
Class Auditor Module
Cross-checks the line-based recognizers against real parsers and lists
class names the rewrite pass would leave untouched.
"""

from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Union
import logging

import tinycss2
from bs4 import BeautifulSoup

from utils.file_utils import iter_supported_files, read_file_content

logger = logging.getLogger(__name__)

NESTED_AT_RULES = {'media', 'supports', 'layer', 'container', 'document'}


class ClassAuditor:
    """Finds classes in markup and stylesheets that the class map does not cover."""

    def extract_classes_html(self, content: str) -> Counter:
        """Count every class on every tag using BeautifulSoup."""
        soup = BeautifulSoup(content, 'html.parser')
        class_counter = Counter()
        for tag in soup.find_all(True):
            class_attr = tag.get('class')
            if class_attr:
                if isinstance(class_attr, str):
                    class_attr = class_attr.split()
                for cls in class_attr:
                    class_counter[cls] += 1
        return class_counter

    def _selector_classes(self, tokens: Iterable, class_counter: Counter) -> None:
        tokens = list(tokens)
        for i, token in enumerate(tokens):
            if token.type == 'literal' and token.value == '.' and i + 1 < len(tokens):
                following = tokens[i + 1]
                if following.type == 'ident':
                    class_counter[following.value] += 1
            elif token.type == 'function':
                # :not(.a), :is(.a, .b), ...
                self._selector_classes(token.arguments, class_counter)

    def _rule_classes(self, rules: List, class_counter: Counter) -> None:
        for rule in rules:
            if rule.type == 'qualified-rule':
                self._selector_classes(rule.prelude, class_counter)
            elif rule.type == 'at-rule' and rule.lower_at_keyword in NESTED_AT_RULES and rule.content:
                nested = tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True)
                self._rule_classes(nested, class_counter)

    def extract_classes_css(self, content: str) -> Counter:
        """Count class selectors in rule preludes, including rules nested in @media and @supports."""
        stylesheet = tinycss2.parse_stylesheet(content, skip_comments=True, skip_whitespace=True)
        class_counter = Counter()
        self._rule_classes(stylesheet, class_counter)
        return class_counter

    def extract_classes(self, content: str, dialect: str) -> Counter:
        if dialect == 'markup':
            return self.extract_classes_html(content)
        elif dialect == 'stylesheet':
            return self.extract_classes_css(content)
        else:
            return Counter()

    def audit(self, root: Union[str, Path], class_map: Dict[str, str]) -> Dict[str, Dict[str, int]]:
        """
        Parse every markup file and stylesheet under root and report missed classes.

        Args:
            root: Directory to scan
            class_map: Mapping built from the collection pass

        Returns:
            {relative file path: {class name: count}} for classes not in
            class_map. Files with nothing missed are left out.
        """
        root = Path(root)
        missed = {}
        for path, dialect in iter_supported_files(root):
            if dialect not in ('markup', 'stylesheet'):
                continue
            try:
                content = read_file_content(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Audit skipping {path}: {e}")
                continue
            found = self.extract_classes(content, dialect)
            not_mapped = {cls: count for cls, count in found.items() if cls not in class_map}
            if not_mapped:
                rel_path = path.relative_to(root).as_posix()
                missed[rel_path] = not_mapped
                logger.debug(f"{rel_path}: {len(not_mapped)} classes not covered by the class map")
        return missed
