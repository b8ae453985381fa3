"""Tests for grader versions and the factory."""

import pytest

from oracle_grader.grader import (
    VERSION_PARAMS,
    BlockGrader,
    GraderVersion,
    GradingParams,
    UnsupportedVersionError,
    create_grader,
    get_params,
    resolve_version,
)


class TestGradingParams:
    """Tests for GradingParams."""

    def test_defaults(self) -> None:
        """Default rule set: top 50, narrow to 10, 10 winners, no band."""
        params = GradingParams()

        assert params.limit == 50
        assert params.minimum == 10
        assert params.winner_count == 10
        assert params.band == 0.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"minimum": 0},
            {"limit": 5, "minimum": 10},
            {"winner_count": 11},
            {"winner_count": 0},
            {"band": -0.01},
        ],
    )
    def test_invalid(self, kwargs) -> None:
        """Inconsistent parameters are rejected at construction."""
        with pytest.raises(ValueError):
            GradingParams(**kwargs)

    def test_to_dict(self) -> None:
        """to_dict lists every parameter."""
        assert GradingParams(band=0.01).to_dict() == {
            "limit": 50,
            "minimum": 10,
            "winner_count": 10,
            "band": 0.01,
        }


class TestVersions:
    """Tests for version resolution."""

    def test_every_version_has_params(self) -> None:
        """The version table covers every enum member."""
        assert set(VERSION_PARAMS) == set(GraderVersion)

    def test_v1_plain_formula(self) -> None:
        """V1 grades without a band."""
        assert get_params(1).band == 0.0

    def test_v2_band(self) -> None:
        """V2 ignores deviations within 1%."""
        assert get_params(2).band == 0.01
        assert get_params(2).limit == 50

    def test_resolve_known(self) -> None:
        """Known integers resolve to enum members."""
        assert resolve_version(1) is GraderVersion.V1
        assert resolve_version(2) is GraderVersion.V2

    @pytest.mark.parametrize("version", [0, 3, -1, 99])
    def test_resolve_unknown(self, version: int) -> None:
        """Unknown versions are a configuration error."""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            resolve_version(version)

        assert exc_info.value.version == version
        assert exc_info.value.supported == [1, 2]


class TestCreateGrader:
    """Tests for create_grader."""

    def test_returns_block_grader(self, registry, fake_hash) -> None:
        """Factory returns a configured BlockGrader."""
        grader = create_grader(1, height=100, previous_winners=[], registry=registry, hash_fn=fake_hash)

        assert isinstance(grader, BlockGrader)
        assert grader.version is GraderVersion.V1
        assert grader.params == VERSION_PARAMS[GraderVersion.V1]
        assert grader.height == 100
        assert grader.count == 0

    def test_v2_params(self, registry, fake_hash) -> None:
        """V2 grader uses the V2 rule set."""
        grader = create_grader(2, height=1, previous_winners=[], registry=registry, hash_fn=fake_hash)

        assert grader.params.band == 0.01

    def test_unknown_version_fails_at_construction(self, registry) -> None:
        """No grader is created for an unknown version."""
        with pytest.raises(UnsupportedVersionError, match="Unsupported grader version 7"):
            create_grader(7, height=1, previous_winners=[], registry=registry)

    def test_previous_winners_copied(self, registry, fake_hash) -> None:
        """Mutating the caller's list doesn't affect the grader."""
        previous = ["aa" * 8, "bb" * 8]
        grader = create_grader(1, height=1, previous_winners=previous, registry=registry, hash_fn=fake_hash)

        previous.append("cc" * 8)

        assert grader.previous_winners == ("aa" * 8, "bb" * 8)
