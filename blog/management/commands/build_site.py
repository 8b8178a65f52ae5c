"""
Management command to build the static site.

Renders every Markdown post in the content directory through the markdown
pipeline, writes one page per post plus an index page, and copies the blog's
static assets next to them.
"""

import shutil
from pathlib import Path

from django.apps import apps
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.template.loader import render_to_string

from blog.posts import collect_posts


class Command(BaseCommand):
    help = 'Build the static site from Markdown posts'

    def add_arguments(self, parser):
        parser.add_argument(
            '--source',
            type=Path,
            help='Directory containing the Markdown posts (default: settings.SITE_CONTENT_DIR)',
        )
        parser.add_argument(
            '--output',
            type=Path,
            help='Directory to write the site to (default: settings.SITE_BUILD_DIR)',
        )
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Remove the output directory before building',
        )

    def handle(self, *args, **options):
        source = Path(options.get('source') or settings.SITE_CONTENT_DIR)
        output = Path(options.get('output') or settings.SITE_BUILD_DIR)
        site_title = getattr(settings, 'SITE_TITLE', 'Funk')

        if not source.is_dir():
            raise CommandError(f'Content directory does not exist: {source}')

        if options.get('clean') and output.exists():
            self.stdout.write(f'Removing {output}...')
            shutil.rmtree(output)
        output.mkdir(parents=True, exist_ok=True)

        posts = collect_posts(source)

        for post in posts:
            page = render_to_string(
                'blog/post.html',
                {'post': post, 'site_title': site_title},
            )
            target = output / post.slug / 'index.html'
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(page, encoding='utf-8')
            if options.get('verbosity', 1) > 1:
                self.stdout.write(f'  {post.source.name} -> {target.relative_to(output)}')

        index = render_to_string(
            'blog/index.html',
            {'posts': posts, 'site_title': site_title},
        )
        (output / 'index.html').write_text(index, encoding='utf-8')

        static_dir = Path(apps.get_app_config('blog').path) / 'static'
        if static_dir.is_dir():
            shutil.copytree(static_dir, output / 'assets', dirs_exist_ok=True)

        self.stdout.write(
            self.style.SUCCESS(f'Built {len(posts)} post(s) into {output}')
        )
