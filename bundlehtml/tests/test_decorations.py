"""Unit tests for bundlehtml.decorations."""

from bundlehtml.decorations import (apply_favicon, apply_favicon_markers,
                                    apply_meta, apply_title)
from bundlehtml.document import HTMLDocument
from bundlehtml.testing.testcases import TestCase


class ApplyMetaTests(TestCase):
    """Unit tests for bundlehtml.decorations.apply_meta."""

    def test_appends(self):
        """Testing apply_meta appends new entries in order"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        apply_meta(document, {
            'viewport': 'width=device-width',
            'description': 'An app',
        })

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>\n'
                         '  <meta name="viewport" '
                         'content="width=device-width">\n'
                         '  <meta name="description" content="An app">'
                         '</head><body></body></html>')

    def test_replaces(self):
        """Testing apply_meta replaces an existing entry in place"""
        document = HTMLDocument(
            '<html><head>'
            '<meta name="description" content="Old">'
            '<meta charset="utf-8">'
            '</head><body></body></html>')
        apply_meta(document, {
            'description': 'New',
        })

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>'
                         '<meta name="description" content="New">'
                         '<meta charset="utf-8">'
                         '</head><body></body></html>')

    def test_idempotent(self):
        """Testing apply_meta applied twice doesn't duplicate entries"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        meta = {
            'description': 'An app',
        }

        apply_meta(document, meta)
        first = document.serialize()

        apply_meta(document, meta)

        self.assertEqual(document.serialize(), first)
        self.assertEqual(len(document.head.find_all('meta')), 1)


class ApplyFaviconMarkersTests(TestCase):
    """Unit tests for bundlehtml.decorations.apply_favicon_markers."""

    def test_appends_verbatim(self):
        """Testing apply_favicon_markers appends markup verbatim"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        apply_favicon_markers(document, [
            '<link rel="icon" sizes="16x16" href="icon-16.png">',
            '<meta name="theme-color" content="#fff">',
        ])

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>'
                         '<link rel="icon" sizes="16x16" href="icon-16.png">'
                         '\n  '
                         '<meta name="theme-color" content="#fff">'
                         '\n  '
                         '</head><body></body></html>')

    def test_with_empty(self):
        """Testing apply_favicon_markers without markers"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        apply_favicon_markers(document, [])

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head></head><body></body></html>')


class ApplyTitleTests(TestCase):
    """Unit tests for bundlehtml.decorations.apply_title."""

    def test_creates(self):
        """Testing apply_title creates a <title>"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        apply_title(document, 'My App')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>\n'
                         '  <title>My App</title>'
                         '</head><body></body></html>')

    def test_replaces_text(self):
        """Testing apply_title replaces the text of an existing <title>"""
        document = HTMLDocument(
            '<html><head><title>Old <b>bold</b></title></head>'
            '<body></body></html>')
        apply_title(document, 'Tom & Jerry')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head><title>Tom &amp; Jerry</title></head>'
                         '<body></body></html>')

    def test_idempotent(self):
        """Testing apply_title applied twice doesn't duplicate <title>"""
        document = HTMLDocument('<html><head></head><body></body></html>')

        apply_title(document, 'My App')
        first = document.serialize()

        apply_title(document, 'My App')

        self.assertEqual(document.serialize(), first)


class ApplyFaviconTests(TestCase):
    """Unit tests for bundlehtml.decorations.apply_favicon."""

    def test_appends(self):
        """Testing apply_favicon appends a link"""
        document = HTMLDocument('<html><head></head><body></body></html>')
        file_name = apply_favicon(document, '/src/images/favicon.ico')

        self.assertEqual(file_name, 'favicon.ico')
        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>\n'
                         '  <link rel="shortcut icon" href="favicon.ico">'
                         '</head><body></body></html>')

    def test_replaces(self):
        """Testing apply_favicon replaces an existing link in place"""
        document = HTMLDocument(
            '<html><head>'
            '<link rel="shortcut icon" href="old.ico">'
            '<link rel="stylesheet" href="a.css">'
            '</head><body></body></html>')
        apply_favicon(document, 'images/new.ico')

        self.assertEqual(document.serialize(),
                         '<!doctype html>\n'
                         '<html><head>'
                         '<link rel="shortcut icon" href="new.ico">'
                         '<link rel="stylesheet" href="a.css">'
                         '</head><body></body></html>')

    def test_idempotent(self):
        """Testing apply_favicon applied twice doesn't duplicate the link"""
        document = HTMLDocument('<html><head></head><body></body></html>')

        apply_favicon(document, 'favicon.ico')
        first = document.serialize()

        apply_favicon(document, 'favicon.ico')

        self.assertEqual(document.serialize(), first)
        self.assertEqual(len(document.head.find_all('link')), 1)
