"""
Matcher and Contrast Tests
==========================
Verifies quantized keys, nearest-signature matching, the match cache
and per-cell contrast enhancement.
"""

import unittest
import numpy as np

from shape_ascii.charsets import CharacterShape, ShapeLibrary
from shape_ascii.matcher import CharacterMatcher, MatchCache, bucket_center, cache_key, quantize
from shape_ascii.preprocessing import enhance_contrast, invert_vector


class TestQuantization(unittest.TestCase):

    def test_buckets_are_floored_and_clamped(self):
        self.assertEqual(quantize([0.0, 1.0, 0.5, 0.999, -0.1, 1.2]), (0, 31, 16, 31, 0, 31))

    def test_key_packs_first_component_highest(self):
        self.assertEqual(cache_key([0.0] * 6), 0)
        self.assertEqual(cache_key([1.0] * 6), 2 ** 30 - 1)
        self.assertEqual(cache_key([1.0, 0, 0, 0, 0, 0]), 31 << 25)
        self.assertEqual(cache_key([0, 0, 0, 0, 0, 1.0]), 31)

    def test_bucket_center_decodes_key(self):
        key = cache_key([0.0, 0.5, 1.0, 0.0, 0.25, 0.75])
        np.testing.assert_allclose(
            bucket_center(key),
            [0.5 / 32, 16.5 / 32, 31.5 / 32, 0.5 / 32, 8.5 / 32, 24.5 / 32],
        )


class TestCharacterMatcher(unittest.TestCase):

    def setUp(self):
        self.matcher = CharacterMatcher()

    def test_blank_vector_matches_space(self):
        self.assertEqual(self.matcher.match([0.0] * 6), ' ')

    def test_solid_vectors_match_heaviest_glyph(self):
        self.assertEqual(self.matcher.match([0.8] * 6), '@')
        self.assertEqual(self.matcher.match([1.0] * 6), '@')

    def test_signatures_match_their_own_character(self):
        for char in '-/\\|.:#':
            signature = self.matcher.library.get_signature(char)
            self.assertEqual(self.matcher.match(signature), char)

    def test_duplicate_signatures_resolve_to_first_entry(self):
        # 'x'/'z' and '^'/'"' share signatures; catalog order decides
        self.assertEqual(self.matcher.match([0.0, 0.0, 0.6, 0.6, 0.6, 0.6]), 'x')
        self.assertEqual(self.matcher.match([0.4, 0.4, 0.0, 0.0, 0.0, 0.0]), '^')

    def test_nearest_scans_exact_vector(self):
        self.assertEqual(self.matcher.nearest([0.0] * 6), ' ')
        self.assertEqual(self.matcher.nearest([0.0, 0.0, 0.8, 0.8, 0.0, 0.0]), '-')

    def test_match_resolves_bucket_center(self):
        vector = [0.0, 0.0, 0.0, 0.0, 0.099, 0.0]
        # Exact vector sits closer to the blank, its bucket center closer to the dot
        self.assertEqual(self.matcher.nearest(vector), ' ')
        self.assertEqual(self.matcher.match(vector), '.')
        self.assertEqual(self.matcher.match(vector), self.matcher.nearest(bucket_center(cache_key(vector))))

    def test_wrong_vector_length_is_rejected(self):
        with self.assertRaises(ValueError):
            self.matcher.match([0.5] * 5)

    def test_custom_library(self):
        library = ShapeLibrary("bars", (
            CharacterShape(' ', (0.0,) * 6),
            CharacterShape('|', (0.5,) * 6),
        ))
        matcher = CharacterMatcher(library=library)
        self.assertEqual(matcher.match([0.9] * 6), '|')
        self.assertEqual(matcher.match([0.1] * 6), ' ')


class TestMatchCache(unittest.TestCase):

    def test_repeat_lookups_hit_cache(self):
        matcher = CharacterMatcher()
        first = matcher.match([0.3, 0.3, 0.5, 0.5, 0.3, 0.3])
        second = matcher.match([0.3, 0.3, 0.5, 0.5, 0.3, 0.3])
        self.assertEqual(first, second)
        self.assertEqual(matcher.cache.stats(), {'size': 1, 'hits': 1, 'misses': 1})

    def test_vectors_in_one_bucket_share_an_entry(self):
        matcher = CharacterMatcher()
        matcher.match([0.50] * 6)
        matcher.match([0.51] * 6)
        self.assertEqual(len(matcher.cache), 1)
        self.assertIn(cache_key([0.5] * 6), matcher.cache)

    def test_disabled_cache_gives_identical_results(self):
        cached = CharacterMatcher()
        uncached = CharacterMatcher(use_cache=False)
        self.assertIsNone(uncached.cache)

        rng = np.random.default_rng(7)
        for vector in rng.random((500, 6)):
            self.assertEqual(cached.match(vector), uncached.match(vector))

        # Second pass is served from the cache and must not drift
        for vector in rng.random((200, 6)):
            cached.match(vector)
        for vector in np.random.default_rng(7).random((500, 6)):
            self.assertEqual(cached.match(vector), uncached.match(vector))

    def test_shared_cache_instance(self):
        cache = MatchCache()
        CharacterMatcher(cache=cache).match([0.2] * 6)
        self.assertEqual(len(cache), 1)
        cache.clear()
        self.assertEqual(cache.stats(), {'size': 0, 'hits': 0, 'misses': 0})


class TestContrast(unittest.TestCase):

    def test_zero_vector_is_unchanged(self):
        self.assertEqual(enhance_contrast([0.0] * 6, 2.0), [0.0] * 6)

    def test_peak_is_preserved_and_lows_pulled_down(self):
        enhanced = enhance_contrast([0.5, 0.25, 0.0, 0.5, 0.125, 0.0], 2.0)
        np.testing.assert_allclose(enhanced, [0.5, 0.125, 0.0, 0.5, 0.03125, 0.0])

    def test_exponent_one_is_identity(self):
        vector = [0.9, 0.3, 0.6, 0.1, 0.0, 0.45]
        np.testing.assert_allclose(enhance_contrast(vector, 1.0), vector)

    def test_exponent_below_one_flattens(self):
        enhanced = enhance_contrast([1.0, 0.25, 0, 0, 0, 0], 0.5)
        self.assertAlmostEqual(enhanced[1], 0.5)

    def test_invert(self):
        self.assertEqual(invert_vector([0.0, 1.0, 0.25, 0.75, 0.5, 1.0]), [1.0, 0.0, 0.75, 0.25, 0.5, 0.0])


if __name__ == '__main__':
    unittest.main()
