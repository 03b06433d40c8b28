import sys
import os
import pytest
from collections import Counter
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from minifier.class_map import short_name, rank_classes, build_map, preview_lines

def test_short_name_first_cycle():
    assert short_name(0) == 'a'
    assert short_name(1) == 'b'
    assert short_name(25) == 'z'

def test_short_name_digit_tiers():
    assert short_name(26) == 'a1'
    assert short_name(35) == 'j1'
    assert short_name(51) == 'z1'
    assert short_name(259) == 'z9'

def test_short_name_lettered_tiers():
    assert short_name(260) == 'aa0'
    assert short_name(261) == 'ba0'
    assert short_name(26 * 19) == 'aa9'
    assert short_name(26 * 20) == 'aa10'

def test_short_name_is_injective():
    names = [short_name(i) for i in range(5000)]
    assert len(set(names)) == len(names)

def test_short_name_rejects_negative_index():
    with pytest.raises(ValueError):
        short_name(-1)

def test_rank_by_descending_count():
    usage = Counter({'rare': 1, 'common': 9, 'mid': 4})
    assert rank_classes(usage) == [('common', 9), ('mid', 4), ('rare', 1)]

def test_ties_keep_first_seen_order():
    usage = Counter(['late', 'early'])
    assert [name for name, _ in rank_classes(usage)] == ['late', 'early']
    assert build_map(usage) == {'late': 'a', 'early': 'b'}

def test_less_used_class_gets_later_name():
    usage = Counter({'foo': 5, 'bar': 5, 'baz': 1})
    class_map = build_map(usage)
    assert class_map['baz'] == 'c'
    assert {class_map['foo'], class_map['bar']} == {'a', 'b'}

def test_build_map_is_bijection():
    usage = Counter({f'class-{i}': i % 7 + 1 for i in range(300)})
    class_map = build_map(usage)
    assert set(class_map) == set(usage)
    assert len(set(class_map.values())) == len(class_map)
    ranked = [name for name, _ in rank_classes(usage)]
    assert [class_map[name] for name in ranked] == [short_name(i) for i in range(len(ranked))]

def test_build_map_is_repeatable():
    usage = Counter({'x': 2, 'y': 2, 'z': 2})
    assert build_map(usage) == build_map(usage)

def test_empty_usage():
    assert build_map(Counter()) == {}
    assert list(preview_lines({})) == []

def test_preview_lines():
    class_map = {'foo': 'a', 'bar': 'b'}
    assert list(preview_lines(class_map)) == ['foo -> a', 'bar -> b']
