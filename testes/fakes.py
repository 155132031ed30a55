"""In-memory stand-ins for the CMS capabilities the field is given."""

from ckeditor_field.models import (
    CategoryGroup,
    EditorConfig,
    ImageTransform,
    Section,
    Site,
    Volume,
)


class FakeCatalog:
    def __init__(self, volumes=None, transforms=None, sections=None, sites=None, groups=None):
        self.volumes = volumes if volumes is not None else [
            Volume(uid="vol-a", name="Images"),
            Volume(uid="vol-b", name="Documents"),
        ]
        self.transforms = transforms if transforms is not None else [
            ImageTransform(uid="tr-thumb", handle="thumb", name="Thumbnail"),
            ImageTransform(uid="tr-hero", handle="hero", name="Hero"),
        ]
        self.sections = sections if sections is not None else [
            Section(uid="sec-home", type="single"),
            Section(uid="sec-news", type="channel", site_settings={1: True, 2: False}),
        ]
        self.sites = sites if sites is not None else [Site(id=1), Site(id=2, language="de-DE")]
        self.groups = groups if groups is not None else [
            CategoryGroup(uid="grp-topics", site_settings={1: True}),
            CategoryGroup(uid="grp-internal", site_settings={1: False}),
        ]

    def all_volumes(self):
        return list(self.volumes)

    def all_transforms(self):
        return list(self.transforms)

    def transform_by_uid(self, uid):
        return next((t for t in self.transforms if t.uid == uid), None)

    def all_sections(self):
        return list(self.sections)

    def all_sites(self):
        return list(self.sites)

    def all_category_groups(self):
        return list(self.groups)


class FakeUser:
    def __init__(self, permissions=(), is_admin=False, language="en-GB"):
        self.permissions = set(permissions)
        self.is_admin = is_admin
        self.language = language

    def check_permission(self, permission):
        return permission in self.permissions


class FakeConfigStore:
    def __init__(self, *configs):
        self.configs = {c.uid: c for c in configs}

    def get_by_uid(self, uid):
        return self.configs[uid]


def previews_config(uid="cfg-previews"):
    return EditorConfig(uid=uid, name="Previews", options={"mediaEmbed": {"previewsInData": True}})
