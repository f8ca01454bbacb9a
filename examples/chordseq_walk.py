"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from vomarkov import MarkovChain

CHORD_SEQUENCES = """
Autumn Leaves; Cm7; F7; BbMaj7; EbMaj7; Am7b5; D7; Gm; Gm;
Blue Bossa; Cm; Cm; Fm7; Fm7; Dm7b5; G7; Cm; Cm;
Fly me to the moon; Am7; Dm7; G7; CMaj7; FMaj7; Bm7b5; E7; Am;
All the things; Fm7; Bbm7; Eb7; AbMaj7; DbMaj7; G7; CMaj7; CMaj7;
Solar; Cm; Cm; Gm7; C7; FMaj7; Fm7; Bb7; EbMaj7; Ebm7; Ab7; DbMaj7; Dm7b5; G7;
"""

if __name__ == '__main__':
    # computes chord sequences continuing a ii-V, with the probability of each continuation
    seqs = [line.split(';')[1:-1] for line in CHORD_SEQUENCES.strip().splitlines()]
    seqs = [[chord.strip() for chord in seq] for seq in seqs]
    vo = MarkovChain(order=2)
    for seq in seqs:
        vo.learn(seq)

    tokens, probs, terminal_prob = vo.get_continuation_probabilities(['Dm7b5', 'G7'])
    for chord, p in zip(tokens, probs):
        print(f"{chord}: {p:.2f}")
    print(f"end: {terminal_prob:.2f}")
    for i in range(10):
        seq = vo.walk_with_previous(['Dm7b5', 'G7'], max_length=16)
        print(' '.join(['Dm7b5', 'G7'] + seq))
