"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import logging

from vomarkov import MarkovChain
from vomarkov.utils import make_sampler

if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')
    train_seq = [1, 2, 3, 2, 3, 4, 3, 4, 5, 4, 5, 6, 5, 6, 7, 6, 7, 8, 7, 8, 9, 8, 9, 10]
    vo = MarkovChain(order=2, sampler=make_sampler(seed=42))
    vo.learn(train_seq)
    zeroseq = vo.sample_zero_order(20)
    print("zero order integer sequence:")
    print(' '.join(str(i) for i in zeroseq))
    print("integer sequence continuing 5 6:")
    print(vo.walk_with_previous([5, 6], max_length=40))
    vo.show_structure()
