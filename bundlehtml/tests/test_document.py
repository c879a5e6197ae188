"""Unit tests for bundlehtml.document."""

from bundlehtml.document import HTMLDocument
from bundlehtml.errors import TemplateError
from bundlehtml.testing.testcases import TestCase


class HTMLDocumentTests(TestCase):
    """Unit tests for bundlehtml.document.HTMLDocument."""

    def test_init_creates_head_and_body(self):
        """Testing HTMLDocument creates <head> and <body> in order"""
        document = HTMLDocument('<html></html>')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head></head><body></body></html>')
        self.assertEqual(len(document.html.find_all('head')), 1)
        self.assertEqual(len(document.html.find_all('body')), 1)

    def test_init_with_body_only(self):
        """Testing HTMLDocument places a new <head> before <body>"""
        document = HTMLDocument('<html><body><p>Hi</p></body></html>')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head></head><body><p>Hi</p></body></html>')

    def test_init_with_head_only(self):
        """Testing HTMLDocument places a new <body> after <head>"""
        document = HTMLDocument(
            '<html><head><title>Hi</title></head></html>')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head><title>Hi</title></head>'
                         '<body></body></html>')

    def test_init_uses_existing(self):
        """Testing HTMLDocument uses existing <head> and <body>"""
        document = HTMLDocument(
            '<html lang="en"><head></head><body></body></html>')

        self.assertIs(document.head, document.html.find('head'))
        self.assertIs(document.body, document.html.find('body'))

    def test_init_without_html(self):
        """Testing HTMLDocument with a template lacking <html>"""
        with self.assertRaisesMessage(TemplateError,
                                      "The input template doesn't contain "
                                      "the `html` tag."):
            HTMLDocument('<div>No document here</div>')

    def test_serialize_replaces_doctype(self):
        """Testing HTMLDocument.serialize replaces the template's doctype"""
        document = HTMLDocument(
            '<!DOCTYPE html>\n<html><head></head><body></body></html>')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head></head><body></body></html>')

    def test_serialize_preserves_markup(self):
        """Testing HTMLDocument.serialize preserves other markup"""
        document = HTMLDocument(
            '<html><head><!-- keep --></head><body>'
            '<script>if (a < b && c) {}</script>'
            '<p class="x y">Tom &amp; Jerry</p></body></html>')

        self.assertEqual(
            document.serialize(),
            '<!doctype html>\n'
            '<html><head><!-- keep --></head><body>'
            '<script>if (a < b && c) {}</script>'
            '<p class="x y">Tom &amp; Jerry</p></body></html>')

    def test_serialize_normalizes_references(self):
        """Testing HTMLDocument.serialize writes character references as
        characters and drops void element slashes
        """
        document = HTMLDocument(
            '<html><head></head><body>'
            '<p>a&nbsp;b &copy; &amp;</p><br/></body></html>')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head></head><body>'
                         '<p>a\xa0b \xa9 &amp;</p><br></body></html>')

    def test_new_element(self):
        """Testing HTMLDocument.new_element keeps attribute order"""
        document = HTMLDocument('<html></html>')
        document.insert_with_separator(
            document.head,
            document.new_element('link', {
                'rel': 'preload',
                'href': 'a.js',
                'as': 'script',
            }))

        self.assertIn('<link rel="preload" href="a.js" as="script">',
                      document.serialize())

    def test_new_element_with_boolean_and_none(self):
        """Testing HTMLDocument.new_element with empty and None values"""
        document = HTMLDocument('<html></html>')
        document.insert_with_separator(
            document.body,
            document.new_element('script', {
                'nomodule': '',
                'crossorigin': None,
                'src': 'a.js',
            }))

        self.assertIn('<script nomodule src="a.js"></script>',
                      document.serialize())

    def test_insert_with_separator(self):
        """Testing HTMLDocument.insert_with_separator"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        document.insert_with_separator(
            document.head,
            document.new_element('meta', {'charset': 'utf-8'}))

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>\n  <meta charset="utf-8"></head>'
                         '<body></body></html>')

    def test_append_raw(self):
        """Testing HTMLDocument.append_raw doesn't escape markup"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        document.append_raw(document.head,
                            '<link rel="icon" href="icon-32.png">')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head><link rel="icon" href="icon-32.png">'
                         '\n  </head><body></body></html>')

    def test_replace_or_append_with_match(self):
        """Testing HTMLDocument.replace_or_append replaces in place"""
        document = HTMLDocument(
            '<html><head>'
            '<meta name="a" content="1">'
            '<meta name="b" content="2">'
            '<meta name="c" content="3">'
            '</head><body></body></html>')

        document.replace_or_append(
            document.head,
            'meta',
            lambda node: node.get('name') == 'b',
            lambda: document.new_element('meta', {
                'name': 'b',
                'content': 'new',
            }))

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>'
                         '<meta name="a" content="1">'
                         '<meta name="b" content="new">'
                         '<meta name="c" content="3">'
                         '</head><body></body></html>')

    def test_replace_or_append_without_match(self):
        """Testing HTMLDocument.replace_or_append appends without a match"""
        document = HTMLDocument(
            '<html><head><meta name="a" content="1"></head>'
            '<body></body></html>')

        document.replace_or_append(
            document.head,
            'meta',
            lambda node: node.get('name') == 'b',
            lambda: document.new_element('meta', {
                'name': 'b',
                'content': '2',
            }))

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head><meta name="a" content="1">'
                         '\n  <meta name="b" content="2"></head>'
                         '<body></body></html>')
