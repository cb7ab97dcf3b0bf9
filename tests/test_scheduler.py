"""Tests for splitting the file list into batches."""

import pytest

from cpfcheck.scheduler import FileBatch, split_into_batches


class TestSplitIntoBatches:
    """Test batch partitioning."""

    @pytest.mark.parametrize('total', [1, 2, 7, 10, 29, 30, 31, 64])
    @pytest.mark.parametrize('workers', [1, 2, 3, 5, 6, 10, 15, 30])
    def test_partitions_list_exactly(self, total, workers):
        files = [f'file_{i}.txt' for i in range(total)]
        batches = split_into_batches(files, workers)

        assert 1 <= len(batches) <= workers
        flattened = [f for batch in batches for f in batch.files]
        assert flattened == files

    def test_batch_sizes(self):
        batches = split_into_batches(list(range(10)), 3)
        assert [len(b) for b in batches] == [4, 4, 2]

    def test_fewer_batches_than_workers(self):
        # ceil(31 / 30) == 2 files per batch -> 16 batches
        batches = split_into_batches(list(range(31)), 30)
        assert len(batches) == 16
        assert len(batches[-1]) == 1

    def test_more_workers_than_files(self):
        batches = split_into_batches(['a.txt', 'b.txt'], 10)
        assert [b.files for b in batches] == [['a.txt'], ['b.txt']]

    def test_batch_ids_sequential(self):
        batches = split_into_batches(list(range(9)), 3)
        assert [b.batch_id for b in batches] == [1, 2, 3]

    def test_empty_list(self):
        assert split_into_batches([], 5) == []

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            split_into_batches(['a.txt'], 0)

    def test_does_not_alias_input(self):
        files = ['a.txt', 'b.txt']
        batches = split_into_batches(files, 1)
        batches[0].files.append('c.txt')
        assert files == ['a.txt', 'b.txt']


class TestFileBatch:
    """Test the FileBatch dataclass."""

    def test_len(self):
        assert len(FileBatch(batch_id=1, files=['a', 'b'])) == 2
        assert len(FileBatch(batch_id=2)) == 0
