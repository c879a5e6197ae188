import os

from django.core.management.base import BaseCommand, CommandError

from bundlehtml.conf import get_html_bundle_options
from bundlehtml.context import FileSystemBuildContext
from bundlehtml.errors import BundleHTMLError
from bundlehtml.manifest import load_manifest
from bundlehtml.options import OutputOptions
from bundlehtml.plugin import HTMLBundlePlugin


class Command(BaseCommand):
    """Builds the HTML document for a bundle described by a manifest.

    The plugin options are read from ``settings.HTML_BUNDLE``.
    """

    help = 'Build the HTML document for a bundle.'

    def add_arguments(self, parser):
        """Add arguments to the command.

        Args:
            parser (object):
                The argument parser to add to.
        """
        parser.add_argument(
            '--manifest',
            action='store',
            dest='manifest',
            required=True,
            help='The JSON manifest listing the files in the bundle.')
        parser.add_argument(
            '--output-dir',
            action='store',
            dest='output_dir',
            default=None,
            help='The directory the bundle was written to.')
        parser.add_argument(
            '--output-file',
            action='store',
            dest='output_file',
            default=None,
            help='The single file the bundle was written to.')
        parser.add_argument(
            '--format',
            action='store',
            dest='format',
            default='es',
            help='The output format of the bundle (defaults to "es").')

    def handle(self, *args, **options):
        output_dir = options['output_dir']
        output_file = options['output_file']
        output_options = OutputOptions(dir=output_dir,
                                       file=output_file,
                                       format=options['format'])

        try:
            plugin = HTMLBundlePlugin(**get_html_bundle_options())
            outputs = load_manifest(options['manifest'])

            context = FileSystemBuildContext(
                output_dir=(output_dir or
                            os.path.dirname(output_file or '') or
                            os.getcwd()))
            plugin.run(context, output_options, outputs)
        except BundleHTMLError as e:
            raise CommandError(str(e))

        for warning in context.warnings:
            self.stderr.write('Warning: %s' % warning)

        for file_name in context.emitted_files:
            self.stdout.write('Wrote %s' % file_name)
