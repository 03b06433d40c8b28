import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from minifier.patterns import (
    extract_html_classes,
    extract_css_classes,
    extract_query_selector_classes,
    extract_class_list_classes,
    extract_class_name_classes,
    extract_js_classes,
)

def test_html_double_quoted_attribute():
    assert extract_html_classes('<div class="foo bar foo">') == ['foo', 'bar', 'foo']

def test_html_single_quoted_and_unquoted_attribute():
    assert extract_html_classes("<p class='x y'>text</p>") == ['x', 'y']
    assert extract_html_classes('<p class=solo>text</p>') == ['solo']

def test_html_each_attribute_counts_separately():
    line = '<a class="btn"></a><b class="btn big"></b>'
    assert extract_html_classes(line) == ['btn', 'btn', 'big']

def test_html_spacing_around_equals():
    assert extract_html_classes('<div class = "card">') == ['card']

def test_html_empty_attribute():
    assert extract_html_classes('<div class="">') == []
    assert extract_html_classes('<div id="main">') == []

def test_css_selectors():
    assert extract_css_classes('.foo:hover { color: red; }') == ['foo']
    assert extract_css_classes('.nav > .item::before, div.card-title {') == ['nav', 'item', 'card-title']

def test_css_ignores_numbers_and_elements():
    assert extract_css_classes('a:hover { margin: 1.5em; }') == []

def test_query_selector():
    assert extract_query_selector_classes('document.querySelector(".foo.bar")') == ['foo', 'bar']
    assert extract_query_selector_classes("document.querySelectorAll('.item')") == ['item']

def test_query_selector_descendant():
    assert extract_query_selector_classes('document.querySelectorAll(".nav .link")') == ['nav', 'link']

def test_query_selector_requires_class_selector():
    assert extract_query_selector_classes('document.querySelector("#main")') == []

def test_class_list_methods():
    assert extract_class_list_classes('el.classList.add("foo", "bar")') == ['foo', 'bar']
    assert extract_class_list_classes("el.classList.remove('active')") == ['active']

def test_class_list_three_arguments():
    assert extract_class_list_classes('el.classList.toggle("a", "b", "c")') == ['a', 'b', 'c']

def test_class_list_ignores_other_methods():
    assert extract_class_list_classes('el.classList.contains("foo")') == []

def test_class_name_assignment():
    assert extract_class_name_classes('el.className = "foo bar"') == ['foo', 'bar']
    assert extract_class_name_classes("el.className='solo'") == ['solo']

def test_class_name_comparison_is_not_assignment():
    assert extract_class_name_classes('if (el.className === "x") {}') == []

def test_js_combined_line():
    line = 'document.querySelector(".menu").classList.toggle("open")'
    assert extract_js_classes(line) == ['menu', 'open']

def test_js_ignores_markup_attributes():
    assert extract_js_classes('const s = "<div class=\\"x\\">";') == []

def test_html_tokens_with_punctuation():
    line = '<div class="md:flex w-1/2 mt-0.5">'
    assert extract_html_classes(line) == ['md:flex', 'w-1/2', 'mt-0.5']

def test_html_unquoted_attribute_stops_at_whitespace():
    assert extract_html_classes('<p class=foo id=x>') == ['foo']

def test_html_unterminated_attribute_not_recognized():
    assert extract_html_classes('<div class="foo') == []

def test_class_list_whitespace_inside_quotes():
    assert extract_class_list_classes('el.classList.add(" foo ", "bar")') == ['foo', 'bar']
