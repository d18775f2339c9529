import json

import numpy as np
import pytest

from conquest import Config, Vocabulary, load_vocabulary, load_vocabulary_arrays
from conquest.vocabulary import normalize_word


def test_normalize_word():
    assert normalize_word('  Cat\n') == 'cat'


def test_keys_are_normalized_on_load():
    vocab = Vocabulary({' Cat ': (3, 4)})
    assert list(vocab) == ['cat']
    assert vocab['cat'] == (3.0, 4.0)
    assert vocab.lookup('CAT') == (3.0, 4.0)


def test_lookup_unknown_is_none():
    assert Vocabulary({'cat': (3, 4)}).lookup('bird') is None


def test_empty_vocabulary_is_allowed():
    vocab = Vocabulary()
    assert len(vocab) == 0
    assert vocab.lookup('cat') is None


def test_is_read_only():
    vocab = Vocabulary({'cat': (3, 4)})
    with pytest.raises(TypeError):
        vocab['dog'] = (0.0, 0.0)


def test_duplicate_after_normalization_is_rejected():
    with pytest.raises(ValueError, match='duplicate'):
        Vocabulary({'cat': (3, 4), 'CAT': (1, 1)})


@pytest.mark.parametrize('coord', [(1.0,), (1.0, 2.0, 3.0), 'xy', None, (float('inf'), 0.0), (0.0, float('nan')), '34', b'34', [True, False], (1.0, True)])
def test_bad_coordinates_are_rejected(coord):
    with pytest.raises(ValueError, match='cat'):
        Vocabulary({'cat': coord})


def test_load_vocabulary_from_json(tmp_path):
    path = tmp_path / 'vocab_2d.json'
    path.write_text(json.dumps({'cat': [3, 4], 'dog': [0, 0]}), encoding='utf-8')

    vocab = load_vocabulary(path)
    assert len(vocab) == 2
    assert vocab['cat'] == (3.0, 4.0)

    # same file through a config
    assert load_vocabulary(Config(data_dir=tmp_path)) == vocab


def test_load_vocabulary_rejects_non_object(tmp_path):
    path = tmp_path / 'vocab_2d.json'
    path.write_text(json.dumps([['cat', 3, 4]]), encoding='utf-8')
    with pytest.raises(ValueError):
        load_vocabulary(path)


def test_load_vocabulary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vocabulary(tmp_path / 'nope.json')


def test_load_vocabulary_arrays(tmp_path):
    config = Config(data_dir=tmp_path)
    config.words_path.write_text(json.dumps(['cat', 'dog']), encoding='utf-8')
    np.save(config.coords_path, np.array([[3.0, 4.0], [0.0, 0.0]]))

    vocab = load_vocabulary_arrays(config)
    assert vocab['cat'] == (3.0, 4.0)
    assert vocab['dog'] == (0.0, 0.0)


def test_load_vocabulary_arrays_shape_mismatch(tmp_path):
    config = Config(data_dir=tmp_path)
    config.words_path.write_text(json.dumps(['cat', 'dog']), encoding='utf-8')
    np.save(config.coords_path, np.zeros((3, 2)))

    with pytest.raises(ValueError, match='shape mismatch'):
        load_vocabulary_arrays(config)


def test_config_rejects_bad_balance_numbers():
    with pytest.raises(ValueError):
        Config(concavity=0)
    with pytest.raises(ValueError):
        Config(score_scale=-1)


def test_load_vocabulary_rejects_string_and_bool_coordinates(tmp_path):
    path = tmp_path / 'vocab_2d.json'
    path.write_text('{"cat": "34"}', encoding='utf-8')
    with pytest.raises(ValueError, match='cat'):
        load_vocabulary(path)

    path.write_text('{"dog": [true, false]}', encoding='utf-8')
    with pytest.raises(ValueError, match='dog'):
        load_vocabulary(path)
