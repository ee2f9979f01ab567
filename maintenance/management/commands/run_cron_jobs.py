"""
Runs the daily sweeps. Install in the system crontab, e.g.

    0 12 * * * cd /srv/karyaa && python manage.py run_cron_jobs
"""

from django.core.management.base import BaseCommand, CommandError

from maintenance import jobs


class Command(BaseCommand):
    help = "Deactivate expired banners and process vendor subscription warnings/expirations"

    def add_arguments(self, parser):
        parser.add_argument(
            '--job',
            choices=['all', 'vendors', 'banners'],
            default='all',
            help="Which sweep to run (default: all)",
        )

    def handle(self, *args, **options):
        job = options['job']
        results = {}

        if job in ('all', 'vendors'):
            results['vendors'] = jobs.process_vendor_subscriptions()
        if job in ('all', 'banners'):
            results['banners'] = jobs.deactivate_banners()

        failed = [name for name, result in results.items() if not result['success']]

        vendors = results.get('vendors')
        if vendors and vendors['success']:
            self.stdout.write(
                f"Vendors: {vendors['warnings_sent']} warning(s), "
                f"{vendors['expired_count']} expired, {len(vendors['errors'])} error(s)"
            )
        banners = results.get('banners')
        if banners and banners['success']:
            self.stdout.write(f"Banners: {banners['deactivated_count']} deactivated")

        if failed:
            raise CommandError(f"Cron job(s) failed: {', '.join(failed)}")
        self.stdout.write(self.style.SUCCESS("Cron jobs completed"))
