from django.apps import AppConfig


class BundleHTMLAppConfig(AppConfig):
    name = 'bundlehtml'
    label = 'bundlehtml'
