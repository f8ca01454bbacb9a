"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import logging
import re

from vomarkov import MarkovChain

TEXT = """Longtemps, je me suis couché de bonne heure. Parfois, à peine ma bougie éteinte, mes yeux se
fermaient si vite que je n'avais pas le temps de me dire: Je m'endors. Et, une demi-heure après, la pensée
qu'il était temps de chercher le sommeil m'éveillait; je voulais poser le volume que je croyais avoir
dans les mains et souffler ma lumière."""

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    # one sequence of chars per sentence, so that walks end on a full stop
    sentences = [s.strip() + '.' for s in TEXT.replace('\n', ' ').split('.') if s.strip()]
    vo = MarkovChain(order=4)
    vo.learn_all([list(s) for s in sentences])
    logging.info(f"learned {vo.nb_learned_sequences} sentences, {vo.voc_size()} distinct chars")
    for i in range(5):
        result = ''.join(vo.walk(max_length=300))
        # Removes spaces before punctuation
        result = re.sub(r"\s([?.!,:;])", r"\1", result)
        print(result)
