import io

import pytest
from mutagen import MutagenError
from mutagen.id3 import ID3, TCON, TIT2

from trackmeta_parser.errors import TaggingError
from trackmeta_parser.tagging import DEFAULT_COMMENT, tag_audio


pytestmark = [pytest.mark.unit, pytest.mark.tagging]

# Stand-in for an MP3 stream; the writer never decodes audio
PAYLOAD = b"\xff\xfb\x90\x64" + b"\x00" * 412


def _read(data: bytes) -> ID3:
    return ID3(io.BytesIO(data))


@pytest.fixture
def result(parser):
    return parser.parse("A feat. B - Song (Prod. by C) [D Remix]", "u")


def test_tag_audio_writes_core_frames(result):
    tags = _read(tag_audio(PAYLOAD, result))

    assert tags["TIT2"].text == ["Song (D Remix)"]
    assert tags["TALB"].text == ["Song (D Remix)"]
    assert tags["TPE1"].text == ["A, B, C, D"]
    assert tags.getall("COMM")[0].text == [DEFAULT_COMMENT]


def test_tag_audio_places_roles(result):
    tags = _read(tag_audio(PAYLOAD, result))

    assert tags["TPE4"].text == ["D"]
    assert tags["TIPL"].people == [["producer", "C"]]


def test_tag_audio_skips_role_frames_when_absent(parser):
    tags = _read(tag_audio(PAYLOAD, parser.parse("A - Song", "u")))

    assert "TPE4" not in tags
    assert "TIPL" not in tags
    assert not tags.getall("APIC")


def test_tag_audio_keeps_payload(result):
    out = tag_audio(PAYLOAD, result)

    assert out.startswith(b"ID3")
    assert out.endswith(PAYLOAD)


def test_tag_audio_cover_and_comment(result):
    cover = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
    tags = _read(tag_audio(PAYLOAD, result, comment="hello", cover_art=cover, cover_art_mime="image/png"))

    apic = tags.getall("APIC")[0]
    assert apic.data == cover
    assert apic.mime == "image/png"
    assert apic.type == 3
    assert tags.getall("COMM")[0].text == ["hello"]


def test_tag_audio_replaces_existing_frames(result):
    existing = ID3()
    existing.add(TIT2(encoding=3, text="Old Title"))
    existing.add(TCON(encoding=3, text="Drum & Bass"))
    buf = io.BytesIO(PAYLOAD)
    existing.save(buf)

    tags = _read(tag_audio(buf.getvalue(), result))

    assert tags["TIT2"].text == ["Song (D Remix)"]
    assert tags["TCON"].text == ["Drum & Bass"]


def test_tag_audio_wraps_mutagen_errors(result, monkeypatch):
    def broken_save(self, *args, **kwargs):
        raise MutagenError("disk on fire")

    monkeypatch.setattr(ID3, "save", broken_save)

    with pytest.raises(TaggingError) as excinfo:
        tag_audio(PAYLOAD, result)

    assert excinfo.value.context["title"] == "Song"
    assert isinstance(excinfo.value.__cause__, MutagenError)


def test_tag_audio_credits_self_remixer(parser):
    tags = _read(tag_audio(PAYLOAD, parser.parse("Artist - Song (Artist Remix)", "u")))

    assert tags["TIT2"].text == ["Song (Artist Remix)"]
    assert tags["TPE1"].text == ["Artist"]
    assert tags["TPE4"].text == ["Artist"]
