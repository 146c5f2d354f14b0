"""
Parsing et generation des fichiers descripteurs XML (format Infuse).

Les noms d'elements sont compares sans tenir compte de la casse et la
racine du document n'est pas imposee. Exemple :

    <media>
      <title>2023-05-01 Hochzeit Meier</title>
      <album>Familie</album>
      <published>2023-05-01</published>
    </media>
"""

from datetime import date, datetime
from typing import Optional
from xml.etree import ElementTree as ET

from loguru import logger

from src.core.ports.parser import IDescriptorParser
from src.core.value_objects.descriptor import Descriptor


class XmlDescriptorParser(IDescriptorParser):
    """Implementation de IDescriptorParser avec xml.etree.ElementTree."""

    def parse(self, content: str) -> Optional[Descriptor]:
        """
        Parse le contenu d'un descripteur.

        Retourne None si le XML est invalide ou si le titre est absent.
        Une date de publication illisible est ignoree.
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            logger.debug(f"XML invalide: {e}")
            return None

        fields = self._collect_fields(root)
        title = fields.get("title")
        if not title:
            return None

        return Descriptor(
            title=title,
            album=fields.get("album") or None,
            published=self._parse_date(fields.get("published")),
        )

    def render(self, tags: dict[str, str]) -> str:
        """Descripteur Infuse construit depuis des tags video (build_infuse_xml)."""
        return build_infuse_xml(tags)

    def _collect_fields(self, root: ET.Element) -> dict[str, str]:
        """Premier texte non vide de chaque element, cle en minuscules."""
        fields: dict[str, str] = {}
        for element in root.iter():
            # Retirer un eventuel namespace {uri}tag
            tag = element.tag.rsplit("}", 1)[-1].lower()
            text = (element.text or "").strip()
            if text and tag not in fields:
                fields[tag] = text
        return fields

    def _parse_date(self, value: Optional[str]) -> Optional[date]:
        """Parse une date ISO (les composantes horaires sont ignorees)."""
        if not value:
            return None
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None


INFUSE_MEDIA_TYPE = "Other"

_DESCRIPTION_TAGS = ("description", "synopsis", "comment")
_DATE_TAGS = ("date", "creation_time")


def _published_from_tags(tags: dict[str, str]) -> Optional[str]:
    """Premiere date AAAA-MM-JJ trouvee dans les tags date / creation_time."""
    for key in _DATE_TAGS:
        value = tags.get(key, "").strip()[:10]
        try:
            return datetime.strptime(value, "%Y-%m-%d").date().isoformat()
        except ValueError:
            continue
    return None


def build_infuse_xml(tags: dict[str, str]) -> str:
    """
    Construit un descripteur Infuse a partir des tags ffmetadata d'une video.

    Correspondance des tags (cles en minuscules, cf. parse_ffmetadata) :
        title -> <title>
        description, synopsis ou comment -> <description>
        album -> <album>
        date ou creation_time (AAAA-MM-JJ...) -> <published>
        genre (separe par ';' ou ',') -> <genres><genre>

    Les tags absents ou vides ne produisent pas d'element. Le document est
    relisible par XmlDescriptorParser.

    Args:
        tags: Tags globaux de la video

    Returns:
        Document XML indente, avec declaration
    """
    root = ET.Element("media", type=INFUSE_MEDIA_TYPE)

    title = tags.get("title", "").strip()
    if title:
        ET.SubElement(root, "title").text = title

    description = next(
        (tags[key].strip() for key in _DESCRIPTION_TAGS if tags.get(key, "").strip()),
        None,
    )
    if description:
        ET.SubElement(root, "description").text = description

    album = tags.get("album", "").strip()
    if album:
        ET.SubElement(root, "album").text = album

    published = _published_from_tags(tags)
    if published:
        ET.SubElement(root, "published").text = published

    genres = [
        genre.strip()
        for genre in tags.get("genre", "").replace(";", ",").split(",")
        if genre.strip()
    ]
    if genres:
        genres_element = ET.SubElement(root, "genres")
        for genre in genres:
            ET.SubElement(genres_element, "genre").text = genre

    ET.indent(root)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'
