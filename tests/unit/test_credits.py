import pytest
from trackmeta_parser.models import ArtistRole, RemixType
from trackmeta_parser.steps.credits import (
    CreditParser,
    FeatureExtractor,
    ProducerExtractor,
    RemixExtractor,
)


pytestmark = [pytest.mark.unit, pytest.mark.credits]


@pytest.fixture(scope="module")
def producers() -> ProducerExtractor:
    return ProducerExtractor()


@pytest.fixture(scope="module")
def features() -> FeatureExtractor:
    return FeatureExtractor()


@pytest.fixture(scope="module")
def remixes() -> RemixExtractor:
    return RemixExtractor()


# ---------- Producer ----------

@pytest.mark.parametrize(
    "raw,names,fragment",
    [
        ("Song (Prod. by D)", ["D"], " (Prod. by D)"),
        ("Song (prod D)", ["D"], " (prod D)"),
        ("Song (Prod.D)", ["D"], " (Prod.D)"),
        ("Song [Prod. by D & E]", ["D", "E"], " [Prod. by D & E]"),
        ("Song (Produced by D)", ["D"], " (Produced by D)"),
        ("Song prod. by D", ["D"], " prod. by D"),
        ("Song Prod D, E", ["D", "E"], " Prod D, E"),
        # an empty credit is still cut, it just names nobody
        ("Song (Prod.)", [], " (Prod.)"),
    ],
)
def test_producer_extract(producers, raw, names, fragment):
    hit = producers.extract(raw)

    assert hit is not None
    assert hit.role is ArtistRole.PRODUCER
    assert hit.names == names
    assert hit.fragment == fragment


def test_producer_bracket_styles_tried_in_order(producers):
    # the parenthesized credit wins over the bare one
    hit = producers.extract("Song prod. X (Prod. by D)")
    assert hit.names == ["D"]


def test_producer_bare_stops_at_bracket(producers):
    hit = producers.extract("Song prod. D (E Remix)")
    assert hit.names == ["D"]
    assert hit.fragment.strip() == "prod. D"


# a bare keyword with nothing after it names nobody
@pytest.mark.parametrize(
    "raw",
    ["Product Placement", "Prodigy Song", "Song", "", "prod. D", "Song prod.", "Song prod. by", "Song Prod"],
)
def test_producer_no_match(producers, raw):
    assert producers.extract(raw) is None


# ---------- Feature ----------

@pytest.mark.parametrize(
    "raw,names",
    [
        ("Song (feat. C)", ["C"]),
        ("Song (featuring C & D)", ["C", "D"]),
        ("Song [ft. C, D]", ["C", "D"]),
        ("Song (w/ C)", ["C"]),
        ("Song feat. C", ["C"]),
        ("Song ft C", ["C"]),
        ("Song w/ C", ["C"]),
        ("Song x C", ["C"]),
        ("Song X C", ["C"]),
        ("Song feat. C (E Remix)", ["C"]),
    ],
)
def test_feature_extract(features, raw, names):
    hit = features.extract(raw)

    assert hit is not None
    assert hit.role is ArtistRole.FEATURING
    assert hit.names == names


@pytest.mark.parametrize(
    "raw",
    ["Song with You", "Witchcraft", "Daft Song", "Song [E x F Mashup]", "feat. C", "Song",
     "Song ft.", "Song feat.", "Song featuring"],
)
def test_feature_no_match(features, raw):
    assert features.extract(raw) is None


@pytest.mark.parametrize(
    "block,main_block,featured",
    [
        ("A & B feat. C", "A & B", ["C"]),
        ("A ft. B & C", "A", ["B", "C"]),
        ("A (feat. B)", "A", ["B"]),
        ("A x B", "A x B", []),
        ("A & B", "A & B", []),
    ],
)
def test_split_artist_block(features, block, main_block, featured):
    assert features.split_artist_block(block) == (main_block, featured)


# ---------- Remix ----------

@pytest.mark.parametrize(
    "raw,names,remix_type",
    [
        ("Song (E Remix)", ["E"], RemixType.REMIX),
        ("Song (E remix)", ["E"], RemixType.REMIX),
        ("Song [E Flip]", ["E"], RemixType.FLIP),
        ("Song (E Bootleg)", ["E"], RemixType.BOOTLEG),
        ("Song [E & F Mashup]", ["E", "F"], RemixType.MASHUP),
        ("Song (E, F & G Edit)", ["E", "F", "G"], RemixType.EDIT),
        ("Song (E Rmx)", ["E"], RemixType.REMIX),
        ("Song (Remix by E)", ["E"], RemixType.REMIX),
        ("Song (Remixed by E)", ["E"], RemixType.REMIX),
        ("Song [Edited by E]", ["E"], RemixType.EDIT),
        ("Song (Flipped by E)", ["E"], RemixType.FLIP),
        ("Song (Bootlegged by E)", ["E"], RemixType.BOOTLEG),
        # a version-only bracket is skipped, the next one is used
        ("Song (Radio Edit) [E Remix]", ["E"], RemixType.REMIX),
    ],
)
def test_remix_extract(remixes, raw, names, remix_type):
    hit = remixes.extract(raw)

    assert hit is not None
    assert hit.role is ArtistRole.REMIXER
    assert hit.names == names
    assert hit.remix_type is remix_type


@pytest.mark.parametrize(
    "raw",
    ["Song (Radio Edit)", "Song (Extended Remix)", "Song (VIP Mix)", "Song Remix", "Song (Remix)", "Editor"],
)
def test_remix_no_match(remixes, raw):
    assert remixes.extract(raw) is None


# ---------- Ordered pipeline ----------

def test_credit_parser_runs_producer_feature_remix(config):
    working, found = CreditParser(config).parse("Song (Prod. D) (feat. C) [E Remix]")

    assert working == "Song"
    assert [h.role for h in found] == [ArtistRole.PRODUCER, ArtistRole.FEATURING, ArtistRole.REMIXER]
    assert [h.names for h in found] == [["D"], ["C"], ["E"]]


def test_credit_parser_role_order_ignores_text_position(config):
    working, found = CreditParser(config).parse("Song [E Remix] (feat. C) (Prod. D)")

    assert working == "Song"
    assert [h.role for h in found] == [ArtistRole.PRODUCER, ArtistRole.FEATURING, ArtistRole.REMIXER]


def test_credit_parser_leaves_plain_titles_alone(config):
    assert CreditParser(config).parse("Just A Song") == ("Just A Song", [])
