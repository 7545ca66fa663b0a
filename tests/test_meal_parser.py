from meal_models import ParsedIngredient
from meal_parser import (
    escape_html,
    extract_youtube_video_id,
    format_instructions,
    instruction_paragraphs,
    parse_ingredients,
    split_instructions,
)


def test_escape_html_neutralizes_markup_characters():
    escaped = escape_html("<script>alert(\"x\" & 'y')</script>")

    for char in "<>\"'":
        assert char not in escaped
    assert escaped == "&lt;script&gt;alert(&quot;x&quot; &amp; &#x27;y&#x27;)&lt;/script&gt;"


def test_escape_html_maps_none_to_empty_string():
    assert escape_html(None) == ""
    assert escape_html("") == ""


def test_escape_html_escapes_existing_entities_again():
    assert escape_html("&amp;") == "&amp;amp;"


def test_parse_ingredients_keeps_single_filled_slot():
    meal = {f"strIngredient{i}": "" for i in range(1, 21)}
    meal.update({f"strMeasure{i}": None for i in range(1, 21)})
    meal["strIngredient3"] = "Salt"
    meal["strMeasure3"] = "1 tsp"

    assert parse_ingredients(meal) == [
        ParsedIngredient(name="Salt", measure="1 tsp", display="Salt – 1 tsp")
    ]


def test_parse_ingredients_drops_measure_without_name():
    meal = {"strIngredient1": "  ", "strMeasure1": "2 cups"}
    assert parse_ingredients(meal) == []


def test_parse_ingredients_trims_and_keeps_slot_order():
    meal = {
        "strIngredient2": " Flour ",
        "strMeasure2": " 200g ",
        "strIngredient1": "Eggs",
        "strIngredient20": "Butter",
        "strMeasure20": "",
        "strIngredient21": "Ignored",
    }

    result = parse_ingredients(meal)

    assert [ing.display for ing in result] == ["Eggs", "Flour – 200g", "Butter"]
    assert result[0].measure == ""


def test_parse_ingredients_handles_empty_record():
    assert parse_ingredients({}) == []


def test_split_instructions_supports_both_line_endings():
    text = "Heat oil.\r\nAdd onion.\n   \nServe."
    assert split_instructions(text) == ["Heat oil.", "Add onion.", "Serve."]
    assert split_instructions(None) == []


def test_format_instructions_drops_blank_lines():
    html = format_instructions("Step one.\nStep two.\n\n")
    assert html == (
        '<p class="meal__instruction-step">Step one.</p>'
        '<p class="meal__instruction-step">Step two.</p>'
    )


def test_format_instructions_escapes_each_line():
    html = format_instructions("Mix <b>well</b>")
    assert html == '<p class="meal__instruction-step">Mix &lt;b&gt;well&lt;/b&gt;</p>'
    assert format_instructions(None) == ""


def test_extract_youtube_video_id_from_known_shapes():
    assert extract_youtube_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_youtube_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_youtube_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0") == "dQw4w9WgXcQ"
    assert extract_youtube_video_id("  dQw4w9WgXcQ  ") == "dQw4w9WgXcQ"


def test_extract_youtube_video_id_rejects_unknown_values():
    assert extract_youtube_video_id("not-a-valid-id-at-all") is None
    assert extract_youtube_video_id(None) is None
    assert extract_youtube_video_id("") is None


def test_extract_youtube_video_id_accepts_any_eleven_characters():
    assert extract_youtube_video_id("abc def!@#$") == "abc def!@#$"


def test_instruction_paragraphs_wraps_lines_as_given():
    html = instruction_paragraphs(["Whisk & fold.", "Rest."])
    assert html == (
        '<p class="meal__instruction-step">Whisk &amp; fold.</p>'
        '<p class="meal__instruction-step">Rest.</p>'
    )
    assert instruction_paragraphs([]) == ""


def test_split_instructions_treats_non_text_as_absent():
    assert split_instructions(42) == []
