"""
Adaptateurs de parsing.

Ce package contient les implementations concretes des interfaces de parsing:
- FFmpegMetadataExtractor: Lit les tags des conteneurs video avec ffmpeg/ffprobe
- XmlDescriptorParser: Parse les fichiers descripteurs XML
"""
