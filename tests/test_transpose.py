import pytest

from chordview.transpose import transpose_chord, transpose_lyrics

SONG = """{Verse 1}
[G]Amazing [C]grace, how [G]sweet the sound
# capo 2
G      C      D
That saved a wretch like [D/F#]me"""

# ---------------------------------------------------------------------------
# transpose_chord
# ---------------------------------------------------------------------------


def test_transpose_chord_up():
    assert transpose_chord("G", "C", "D") == "A"


def test_transpose_chord_down_wraps():
    assert transpose_chord("A", "D", "C") == "G"


def test_transpose_chord_round_trip():
    assert transpose_chord(transpose_chord("F#m", "E", "G"), "G", "E") == "F#m"


def test_transpose_chord_enharmonic_roots_agree():
    assert transpose_chord("Eb", "C", "D") == transpose_chord("D#", "C", "D") == "F"


def test_transpose_chord_preserves_suffix():
    assert transpose_chord("Gmaj7", "C", "E") == "Bmaj7"
    assert transpose_chord("Asus4", "A", "B") == "Bsus4"


def test_transpose_chord_flat_keys():
    assert transpose_chord("C", "Bb", "C") == "D"


def test_transpose_chord_flat_root_comes_back_sharp():
    assert transpose_chord("Bb", "C", "C") == "A#"


def test_transpose_chord_lowercase_root_normalised():
    assert transpose_chord("am", "C", "D") == "Bm"


def test_transpose_chord_unknown_key_unchanged():
    assert transpose_chord("G", "H", "D") == "G"
    assert transpose_chord("G", "C", "Cb") == "G"


def test_transpose_chord_unknown_root_unchanged():
    assert transpose_chord("Cb", "C", "D") == "Cb"
    assert transpose_chord("N.C.", "C", "D") == "N.C."


# ---------------------------------------------------------------------------
# transpose_lyrics — identity cases
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("key", ["C", "F#", "Bb", "nonsense"])
def test_same_key_is_identity(key):
    assert transpose_lyrics(SONG, key, key) == SONG


@pytest.mark.parametrize("from_key", [None, "", "   "])
def test_missing_source_key_is_identity(from_key):
    assert transpose_lyrics(SONG, from_key, "A") == SONG


def test_unknown_key_leaves_text_unchanged():
    assert transpose_lyrics(SONG, "G", "H") == SONG


@pytest.mark.parametrize(
    "text, from_key, to_key",
    [
        ("[ G / B ]Oh", "G", "H"),
        ("[ Em ]x", "X", "Y"),
        ("  G   D  ", "Cb", "D"),
    ],
)
def test_unknown_key_keeps_bracket_spacing(text, from_key, to_key):
    assert transpose_lyrics(text, from_key, to_key) == text


# ---------------------------------------------------------------------------
# transpose_lyrics — inline brackets
# ---------------------------------------------------------------------------


def test_inline_chords_transposed():
    assert transpose_lyrics("[C]Amazing [G]grace", "C", "D") == "[D]Amazing [A]grace"


def test_slash_chord_segments_transposed_independently():
    assert transpose_lyrics("[G/B]", "C", "D") == "[A/C#]"


def test_slash_chord_segments_trimmed():
    assert transpose_lyrics("[ G / B ]", "C", "D") == "[A/C#]"


def test_non_chord_bracket_left_alone():
    assert transpose_lyrics("[Verse 1] [Chorus]", "C", "D") == "[Verse 1] [Chorus]"


def test_lyrics_outside_brackets_untouched():
    # "a" would count as a chord on a chord row
    assert transpose_lyrics("[C]a [G]be", "C", "D") == "[D]a [A]be"


def test_unterminated_bracket_line_unchanged():
    assert transpose_lyrics("G D [oops", "G", "A") == "G D [oops"


def test_first_closing_bracket_ends_group():
    assert transpose_lyrics("[C]]x[G]", "C", "D") == "[D]]x[A]"


# ---------------------------------------------------------------------------
# transpose_lyrics — chord rows
# ---------------------------------------------------------------------------


def test_chord_row_keeps_spacing():
    assert transpose_lyrics("G    D   Em", "G", "A") == "A    E   F#m"


def test_chord_row_leading_whitespace_kept():
    assert transpose_lyrics("   C   F", "C", "G") == "   G   C"


def test_chord_row_non_chords_untouched():
    assert transpose_lyrics("G  x2  D", "G", "A") == "A  x2  E"


def test_section_and_comment_lines_without_chords_untouched():
    text = "{Chorus}\n# The Lord is near"
    assert transpose_lyrics(text, "C", "D") == text


# ---------------------------------------------------------------------------
# transpose_lyrics — structure
# ---------------------------------------------------------------------------


def test_whole_song():
    out = transpose_lyrics(SONG, "G", "A")
    lines = out.split("\n")
    assert lines[1] == "[A]Amazing [D]grace, how [A]sweet the sound"
    assert lines[3] == "A      D      E"
    assert lines[4] == "That saved a wretch like [E/G#]me"


@pytest.mark.parametrize("text", ["", "\n", SONG, SONG + "\n\n", "[C]\n\nC G\n"])
def test_line_count_preserved(text):
    assert len(transpose_lyrics(text, "C", "F").split("\n")) == len(text.split("\n"))


def test_results_are_memoised():
    transpose_lyrics.cache_clear()
    first = transpose_lyrics("[C]x", "C", "E")
    second = transpose_lyrics("[C]x", "C", "E")
    assert first == second == "[E]x"
    assert transpose_lyrics.cache_info().hits == 1
