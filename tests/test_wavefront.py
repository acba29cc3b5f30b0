import pytest

from lcsbench.sequential import fill_score_matrix, lcs_length
from lcsbench.wavefront import (
    block_diagonals,
    calculate_block_size,
    main,
    wavefront_lcs,
)


def test_block_size_matches_source_example():
    assert calculate_block_size(10, 7, 4) == 4


def test_block_size_never_below_one():
    assert calculate_block_size(0, 0, 4) == 1
    assert calculate_block_size(3, 0, 2) == 1
    assert calculate_block_size(1, 1, 16) == 1


def test_block_size_clamped_to_shorter_sequence():
    assert calculate_block_size(100, 3, 1) == 3


@pytest.mark.parametrize("size_a,size_b,threads", [(10, 7, 4), (50, 80, 3), (5, 200, 16)])
def test_block_size_bounded_by_sizes(size_a, size_b, threads):
    size = calculate_block_size(size_a, size_b, threads)
    assert 1 <= size <= min(size_a, size_b)


def test_block_size_rejects_zero_threads():
    with pytest.raises(ValueError):
        calculate_block_size(10, 10, 0)


def test_diagonal_count_from_source_example():
    diagonals = list(block_diagonals(10, 7, 4))
    assert len(diagonals) == 4


@pytest.mark.parametrize("size_a,size_b,block", [(10, 7, 4), (9, 9, 3), (1, 13, 5), (13, 1, 2)])
def test_blocks_cover_each_cell_once(size_a, size_b, block):
    cells = [
        (i, j)
        for diagonal in block_diagonals(size_a, size_b, block)
        for b in diagonal
        for i in b.rows
        for j in b.cols
    ]
    assert len(cells) == len(set(cells))
    assert set(cells) == {(i, j) for i in range(1, size_b + 1) for j in range(1, size_a + 1)}


def test_blocks_lie_on_their_diagonal():
    for d, diagonal in enumerate(block_diagonals(10, 7, 4)):
        assert diagonal
        assert all(b.bi + b.bj == d for b in diagonal)


def test_no_blocks_for_empty_sequence():
    assert list(block_diagonals(0, 5, 2)) == []


def test_block_diagonals_rejects_zero_block():
    with pytest.raises(ValueError):
        list(block_diagonals(4, 4, 0))


def test_classic_example():
    assert wavefront_lcs("ABCBDAB", "BDCABA", 2).score() == 4


@pytest.mark.parametrize("threads", [1, 2, 3, 8])
@pytest.mark.parametrize(
    "seq_a,seq_b",
    [
        ("GATTACAGATTACA", "TACGATCAGTA"),
        ("AAAA", "AA"),
        ("ACGT", "TGCA"),
        ("X" * 40, "XY" * 25),
    ],
)
def test_matches_sequential_matrix(seq_a, seq_b, threads):
    result = wavefront_lcs(seq_a, seq_b, threads)
    assert result.rows == fill_score_matrix(seq_a, seq_b).rows
    assert result.score() == lcs_length(seq_a, seq_b)


def test_empty_sequences_score_zero():
    assert wavefront_lcs("", "ACGT", 4).score() == 0
    assert wavefront_lcs("", "", 4).score() == 0


def test_rejects_zero_threads():
    with pytest.raises(ValueError):
        wavefront_lcs("AC", "CA", 0)


def test_main_prints_score(tmp_path, capsys):
    file_a = tmp_path / "a.in"
    file_b = tmp_path / "b.in"
    file_a.write_text("ABCBDAB\n")
    file_b.write_text("BDCABA\n")
    assert main([str(file_a), str(file_b), "2"]) == 0
    out = capsys.readouterr().out
    assert "Score: 4 tempo:" in out


def test_main_time_only(tmp_path, capsys):
    file_a = tmp_path / "a.in"
    file_b = tmp_path / "b.in"
    file_a.write_text("AC")
    file_b.write_text("CA")
    assert main([str(file_a), str(file_b), "1", "--time-only"]) == 0
    out = capsys.readouterr().out
    assert "Score" not in out
    assert float(out) >= 0.0


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.in"
    assert main([str(missing), str(missing)]) == 1
    assert "Error reading file" in capsys.readouterr().out