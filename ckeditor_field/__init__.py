"""
Top-level package for the CKEditor rich-text field.

This package bundles the pieces a CMS needs to host CKEditor 5 as a field
type and to move content written with the older Redactor editor over to it.
Modules are split into subpackages:

* :mod:`ckeditor_field.parsers` – Redactor → CKEditor markup migration
* :mod:`ckeditor_field.options` – link, volume and transform option sources
  and the client-side editor config
* :mod:`ckeditor_field.models` – pydantic settings and catalog records
* :mod:`ckeditor_field.extractors` – CSV content export readers
* :mod:`ckeditor_field.utils` – structured migration reports

:class:`ckeditor_field.field.RichTextField` ties parsers and options
together behind the field's display and persistence paths, and
:mod:`ckeditor_field.migration_tool` runs the persistence path in batch.
The CMS itself (volumes, permissions, editor configs) is always injected.
"""
