"""Unit tests for bundlehtml.minify."""

from bundlehtml.minify import (DEFAULT_MINIFY_OPTIONS, get_minify_options,
                               minify_html)
from bundlehtml.testing.testcases import TestCase


class GetMinifyOptionsTests(TestCase):
    """Unit tests for bundlehtml.minify.get_minify_options."""

    def test_with_true(self):
        """Testing get_minify_options with True"""
        options = get_minify_options(True)

        self.assertEqual(options, DEFAULT_MINIFY_OPTIONS)
        self.assertIsNot(options, DEFAULT_MINIFY_OPTIONS)

    def test_with_dict(self):
        """Testing get_minify_options merges over the defaults"""
        options = get_minify_options({
            'remove_comments': False,
            'keep_pre': True,
        })

        self.assertFalse(options['remove_comments'])
        self.assertTrue(options['keep_pre'])
        self.assertTrue(options['remove_empty_space'])

    def test_with_unknown(self):
        """Testing get_minify_options drops unknown options"""
        with self.assertLogs('bundlehtml.minify', level='WARNING') as cm:
            options = get_minify_options({
                'collapse_whitespace': True,
            })

        self.assertNotIn('collapse_whitespace', options)
        self.assertEqual(cm.records[0].getMessage(),
                         'htmlmin option "collapse_whitespace" not '
                         'recognized')


class MinifyHTMLTests(TestCase):
    """Unit tests for bundlehtml.minify.minify_html."""

    def test_removes_comments(self):
        """Testing minify_html removes comments by default"""
        html = minify_html('<html><body><!-- note --><p>Hi</p></body></html>')

        self.assertNotIn('note', html)
        self.assertIn('<p>Hi</p>', html)

    def test_with_remove_comments_false(self):
        """Testing minify_html with remove_comments=False"""
        html = minify_html('<html><body><!-- note --><p>Hi</p></body></html>',
                           {
                               'remove_comments': False,
                           })

        self.assertIn('<!-- note -->', html)
