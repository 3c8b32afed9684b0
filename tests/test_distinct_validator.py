"""Tests for palette distinction checks."""

from contrastlab import validate_color_distinction
from contrastlab.logic.distinct.validator import suggest_distinct_color


class TestPairs:
    """Tests for pairwise distances."""

    def test_near_duplicates_flagged(self):
        """Test two almost identical blues fail next to an orange."""
        result = validate_color_distinction(["#1f77b4", "#1f78b5", "#ff7f0e"], minimum_distance=25)
        assert not result.valid
        first = result.insufficient_pairs[0]
        assert (first.color1, first.color2) == ("#1f77b4", "#1f78b5")
        assert len(result.insufficient_pairs) == 1

    def test_pairs_in_input_order(self):
        """Test every unordered pair appears once, in input order."""
        colors = ["#000", "#fff", "red", "blue"]
        result = validate_color_distinction(colors)
        assert [(p.color1, p.color2) for p in result.color_pairs] == [
            ("#000", "#fff"), ("#000", "red"), ("#000", "blue"),
            ("#fff", "red"), ("#fff", "blue"),
            ("red", "blue"),
        ]

    def test_all_distinct(self):
        """Test a well-separated palette passes with no groups."""
        result = validate_color_distinction(["#000000", "#ffffff", "#ff0000"])
        assert result.valid
        assert result.insufficient_pairs == ()
        assert result.similar_groups is None
        assert result.recommendations is None

    def test_threshold_is_inclusive(self):
        """Test a distance equal to the minimum is sufficient."""
        result = validate_color_distinction(["#fff", "#fff"], minimum_distance=0)
        assert result.valid
        assert result.color_pairs[0].distance == 0

    def test_defaults_reported(self):
        """Test the default algorithm and minimum distance."""
        result = validate_color_distinction(["#000", "#fff"])
        assert result.algorithm == "CIEDE2000"
        assert result.minimum_distance == 25

    def test_algorithm_selection(self):
        """Test CIE76 is used when asked for."""
        result = validate_color_distinction(["#000", "#fff"], algorithm="cie76")
        assert result.algorithm == "CIE76"
        assert abs(result.color_pairs[0].distance - 100.0) < 0.05

    def test_unknown_algorithm_falls_back(self, capsys):
        """Test unknown names fall back to CIEDE2000."""
        result = validate_color_distinction(["#000", "#fff"], algorithm="euclid")
        assert result.algorithm == "CIEDE2000"
        assert "euclid" in capsys.readouterr().err


class TestInvalidInput:
    """Tests for unparsable colors."""

    def test_too_few_valid(self):
        """Test one valid color is not enough."""
        result = validate_color_distinction(["#fff", "nope"])
        assert not result.valid
        assert result.error == "At least two valid colors are required"
        assert result.invalid_colors == ("nope",)

    def test_empty(self):
        """Test an empty palette."""
        result = validate_color_distinction([])
        assert not result.valid
        assert result.error == "At least two valid colors are required"
        assert result.invalid_colors == ()

    def test_invalid_skipped(self):
        """Test bad entries are reported but do not block the check."""
        result = validate_color_distinction(["#000", "bogus", "#fff"])
        assert result.valid
        assert result.invalid_colors == ("bogus",)
        assert len(result.color_pairs) == 1


class TestGrouping:
    """Tests for similar-color groups."""

    def test_seven_color_palette(self, seven_color_palette):
        """Test only the mutually close colors form a group."""
        a, b, c = seven_color_palette["similar"]
        d, e, f, g = seven_color_palette["distinct"]
        result = validate_color_distinction([a, d, b, e, c, f, g], minimum_distance=25)
        assert not result.valid
        assert len(result.similar_groups) == 1
        assert set(result.similar_groups[0]) == {a, b, c}
        assert len(result.similar_groups[0]) == 3

    def test_transitive_group(self):
        """Test a chain of close colors is one group."""
        result = validate_color_distinction(
            ["#808080", "#888888", "#909090"], minimum_distance=5, algorithm="CIE76"
        )
        assert len(result.insufficient_pairs) == 2
        assert result.similar_groups == (("#808080", "#888888", "#909090"),)

    def test_duplicates_are_separate_members(self):
        """Test repeated strings stay distinct group members."""
        result = validate_color_distinction(["#abc", "#abc", "#000"])
        assert result.similar_groups == (("#abc", "#abc"),)

    def test_grouping_disabled(self):
        """Test groups and recommendations are omitted."""
        result = validate_color_distinction(
            ["#1f77b4", "#1f78b5", "#ff7f0e"], group_similar_colors=False
        )
        assert not result.valid
        assert result.similar_groups is None
        assert result.recommendations is None


class TestRecommendations:
    """Tests for replacement suggestions."""

    def test_one_per_group(self, seven_color_palette):
        """Test the first of equally connected members is replaced."""
        colors = seven_color_palette["similar"] + seven_color_palette["distinct"]
        result = validate_color_distinction(colors)
        assert len(result.recommendations) == 1
        rec = result.recommendations[0]
        assert rec.original_color == "#ff0000"
        assert rec.suggested_color == "#ff8000"
        assert rec.hsl == (30, 100, 50)

    def test_most_connected_member(self):
        """Test the member with the most close pairs is replaced."""
        result = validate_color_distinction(
            ["#808080", "#888888", "#909090"], minimum_distance=5, algorithm="CIE76"
        )
        rec = result.recommendations[0]
        assert rec.original_color == "#888888"
        assert rec.hsl == (30, 20, 53)

    def test_disabled(self):
        """Test recommendations can be switched off."""
        result = validate_color_distinction(
            ["#1f77b4", "#1f78b5", "#ff7f0e"], include_recommendations=False
        )
        assert result.similar_groups is not None
        assert result.recommendations is None

    def test_hue_shift(self):
        """Test hue rotates by 30 and saturation/lightness stay in band."""
        assert suggest_distinct_color((31, 119, 180)) == (235, 71, 41)

    def test_hue_wraps(self):
        """Test the hue shift wraps past 360."""
        h, _, _ = suggest_distinct_color((255, 0, 64))
        assert h == 15

    def test_dark_color_lifted(self):
        """Test lightness below the band is pushed up."""
        assert suggest_distinct_color((0, 0, 0)) == (30, 20, 20)

    def test_light_color_lowered(self):
        """Test lightness above the band is pushed down."""
        assert suggest_distinct_color((255, 255, 255)) == (30, 20, 80)


class TestToDict:
    """Tests for the serialized form."""

    def test_keys(self):
        """Test camelCase keys."""
        data = validate_color_distinction(["#1f77b4", "#1f78b5", "#ff7f0e"]).to_dict()
        assert data["valid"] is False
        assert data["algorithm"] == "CIEDE2000"
        assert data["minimumDistance"] == 25
        assert len(data["colorPairs"]) == 3
        assert data["insufficientPairs"][0]["sufficient"] is False
        assert data["similarGroups"] == [["#1f77b4", "#1f78b5"]]
        assert data["recommendations"][0]["originalColor"] == "#1f77b4"
        assert "invalidColors" not in data

    def test_error_form(self):
        """Test an error result only carries the message and bad inputs."""
        data = validate_color_distinction(["x", "y"]).to_dict()
        assert data == {
            "valid": False,
            "error": "At least two valid colors are required",
            "invalidColors": ["x", "y"],
        }
