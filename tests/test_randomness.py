from unittest import TestCase, main

from tilemerge.core.randomness import GeneratorSource, RandomSource, ScriptedSource


class TestGeneratorSource(TestCase):
    def test_same_seed_same_draws(self):
        """
        Two sources with the same seed produce the same stream.
        """
        first, second = GeneratorSource(seed=11), GeneratorSource(seed=11)
        self.assertEqual([first.index(16) for _ in range(50)], [second.index(16) for _ in range(50)])
        self.assertEqual([first.coin() for _ in range(50)], [second.coin() for _ in range(50)])

    def test_reseed_restarts_stream(self):
        """
        Reseeding replays the draws of a fresh source.
        """
        source = GeneratorSource(seed=5)
        draws = [source.index(100) for _ in range(10)]
        source.reseed(5)
        self.assertEqual([source.index(100) for _ in range(10)], draws)

    def test_index_range(self):
        """
        Indices stay in [0, length) and cover it.
        """
        source = GeneratorSource(seed=1)
        draws = {source.index(4) for _ in range(200)}
        self.assertEqual(draws, {0, 1, 2, 3})

        with self.assertRaises(ValueError):
            source.index(0)

    def test_protocol(self):
        """
        Both sources satisfy the random source interface.
        """
        self.assertIsInstance(GeneratorSource(), RandomSource)
        self.assertIsInstance(ScriptedSource(), RandomSource)


class TestScriptedSource(TestCase):
    def test_replay(self):
        """
        Draws are returned in order.
        """
        source = ScriptedSource(coins=[True, False], indices=[3, 0])
        self.assertTrue(source.coin())
        self.assertFalse(source.coin())
        self.assertEqual(source.index(4), 3)
        self.assertEqual(source.index(4), 0)

    def test_exhausted(self):
        """
        Running out of scripted draws is an error.
        """
        source = ScriptedSource()
        with self.assertRaises(LookupError):
            source.coin()
        with self.assertRaises(LookupError):
            source.index(4)

    def test_index_outside_range(self):
        """
        A scripted index must fit the requested length.
        """
        with self.assertRaises(ValueError):
            ScriptedSource(indices=[4]).index(4)


if __name__ == '__main__':
    main()
