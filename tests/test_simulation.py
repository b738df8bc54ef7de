import numpy as np
import pandas as pd
import pytest

from share_consensus.common.interpolation import interpolate
from share_consensus.recovery.consensus import Share
from share_consensus.recovery.solver import solve_document
from share_consensus.simulation import (
    ExperimentConfig,
    ShareDealer,
    corrupt_shares,
    encode_document,
    run_corruption_sweep,
)
from share_consensus.simulation.experiment import METRICS_FILENAME, PLOT_FILENAME


def test_dealer_shares_lie_on_polynomial():
    dealer = ShareDealer(k=3, n=5, rng=np.random.default_rng(3))
    dealt = dealer.deal(secret=42)
    assert dealt.secret == 42
    assert dealt.coefficients[0] == 42
    assert [s.x for s in dealt.shares] == [1, 2, 3, 4, 5]
    assert dealt.shares[0].y == sum(dealt.coefficients)
    poly = interpolate([(s.x, s.y) for s in dealt.shares[2:]])
    assert [c.numerator for c in poly] == list(dealt.coefficients)


def test_dealer_validates_parameters():
    with pytest.raises(ValueError):
        ShareDealer(k=4, n=3)
    with pytest.raises(ValueError):
        ShareDealer(k=2, n=3, coefficient_bound=0)


def test_corrupt_shares_changes_only_picked():
    rng = np.random.default_rng(11)
    dealt = ShareDealer(k=2, n=6, rng=rng).deal()
    corrupted, picked = corrupt_shares(dealt.shares, 2, rng)
    assert len(picked) == 2
    for idx, (before, after) in enumerate(zip(dealt.shares, corrupted)):
        assert before.x == after.x
        assert (before.y != after.y) == (idx in picked)
    with pytest.raises(ValueError):
        corrupt_shares(dealt.shares, 7, rng)


def test_encoded_document_recovers_secret_under_minority_corruption():
    rng = np.random.default_rng(5)
    dealer = ShareDealer(k=3, n=7, rng=rng)
    for corrupted_count in range(3):
        dealt = dealer.deal()
        shares, picked = corrupt_shares(dealt.shares, corrupted_count, rng)
        document = encode_document(shares, 3, rng)
        assert document["keys"] == {"n": 7, "k": 3}
        result = solve_document(document)
        assert result.secret == str(dealt.secret)
        assert sorted(int(x) for x, _ in result.wrong_shares) == [shares[i].x for i in picked]


def test_encode_document_with_fixed_bases():
    rng = np.random.default_rng(0)
    dealt = ShareDealer(k=2, n=2, rng=rng).deal(secret=5)
    document = encode_document(dealt.shares, 2, rng, bases=[2, 16])
    assert document["1"]["base"] == "2"
    assert document["2"]["base"] == "16"
    with pytest.raises(ValueError):
        encode_document(dealt.shares, 2, rng, bases=[2])


def test_corruption_sweep_writes_metrics_and_plot(tmp_path):
    config = ExperimentConfig(k=2, n=4, trials=2, seed=1)
    metrics_path, plot_path = run_corruption_sweep(config, tmp_path)
    assert metrics_path == tmp_path / METRICS_FILENAME
    assert plot_path == tmp_path / PLOT_FILENAME
    assert plot_path.stat().st_size > 0

    df = pd.read_csv(metrics_path)
    assert len(df) == 3 * 2
    assert set(df["corrupted"]) == {0, 1, 2}
    assert df.loc[df["corrupted"] <= 1, "recovered"].all()
    assert (df.loc[df["corrupted"] == 0, "inliers"] == 4).all()


def test_experiment_config_validation():
    with pytest.raises(ValueError):
        ExperimentConfig(k=5, n=4)
    with pytest.raises(ValueError):
        ExperimentConfig(trials=0)


def test_corruption_keeps_values_encodable():
    rng = np.random.default_rng(2)
    shares = [Share(x, 0) for x in range(1, 9)]
    corrupted, picked = corrupt_shares(shares, 8, rng)
    assert picked == tuple(range(8))
    assert all(s.y > 0 for s in corrupted)
    document = encode_document(corrupted, 2, rng)
    assert not any(entry["value"].startswith("-") for key, entry in document.items() if key != "keys")
