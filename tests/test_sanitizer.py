from utils.sanitizer import (
    sanitize_ingredient_text, sanitize_lines, sanitize_recipe_name, sanitize_tags, sanitize_text,
    sanitize_url,
)


def test_sanitize_text():
    assert sanitize_text(None) == ''
    assert sanitize_text('  line one\nline two\x00 ') == 'line one\nline two'
    assert sanitize_text('abcdef', max_length=3) == 'abc...'


def test_sanitize_recipe_name():
    assert sanitize_recipe_name('') == 'Imported Recipe'
    assert sanitize_recipe_name('  Mac   &  Cheese ') == 'Mac & Cheese'
    assert sanitize_recipe_name('\x01\x02') == 'Imported Recipe'


def test_sanitize_ingredient_text_keeps_text_as_written():
    assert sanitize_ingredient_text(' salt & pepper ') == 'salt & pepper'
    assert sanitize_ingredient_text('1 1/2  cups\tsugar') == '1 1/2  cups sugar'
    assert sanitize_ingredient_text(None) == ''


def test_sanitize_lines():
    assert sanitize_lines('2 cups flour\r\n\r\n 1 egg ', max_items=10) == ['2 cups flour', '1 egg']
    assert sanitize_lines(['2 cups flour', '', '  ', '1 egg'], max_items=10) == ['2 cups flour', '1 egg']
    assert sanitize_lines(['a', 'b', 'c'], max_items=2) == ['a', 'b']
    assert sanitize_lines(None, max_items=5) == []


def test_sanitize_tags():
    assert sanitize_tags('Vegan, vegan, Soups,,') == ['Vegan', 'Soups']
    assert sanitize_tags(['  Rice ', None, 'Pasta']) == ['Rice', 'Pasta']
    assert sanitize_tags(None) == []


def test_sanitize_url():
    assert sanitize_url(' https://example.com/dal ') == 'https://example.com/dal'
    assert sanitize_url('http://example.com/a?b=1') == 'http://example.com/a?b=1'
    assert sanitize_url(None) == ''
    assert sanitize_url(42) == ''


def test_sanitize_url_rejects_unsafe_links():
    assert sanitize_url('javascript:alert(1)') == ''
    assert sanitize_url('JavaScript:alert(1)') == ''
    assert sanitize_url('data:text/html;base64,PHNjcmlwdD4=') == ''
    assert sanitize_url('https://example.com/?next=javascript:alert(1)') == ''
    assert sanitize_url('ftp://example.com/recipe') == ''
    assert sanitize_url('/relative/path') == ''
    assert sanitize_url('https://') == ''
    assert sanitize_url('https://example.com/' + 'a' * 600) == ''
