import unittest

from vomarkov.utils import make_sampler, random_number_between


class TestSamplers(unittest.TestCase):

    def test_range_is_inclusive(self):
        seen = {random_number_between(1, 3) for _ in range(300)}
        self.assertEqual(seen, {1, 2, 3})

    def test_single_value_range(self):
        self.assertEqual(random_number_between(5, 5), 5)
        self.assertIsInstance(random_number_between(5, 5), int)

    def test_empty_range(self):
        with self.assertRaises(ValueError):
            random_number_between(2, 1)

    def test_seeded_samplers_replay(self):
        first = make_sampler(seed=3)
        second = make_sampler(seed=3)
        self.assertEqual([first(1, 100) for _ in range(20)], [second(1, 100) for _ in range(20)])


if __name__ == '__main__':
    unittest.main()
