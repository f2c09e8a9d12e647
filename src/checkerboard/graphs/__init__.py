from checkerboard.graphs.hypercube import (
    number_of_states, number_of_colors, neighbors_of,
    all_states, hamming_weights, hypercube_graph,
)
