## Tester for comparing the cycle-detection trackers of kruskal.py

import re

from typing import Any, Callable

import networkx as nx

def _search(pattern: str, stdout: str) -> str:
    match = re.search(pattern, stdout)
    if match is None:
        raise ValueError(f'No match for {pattern!r} in kruskal output')
    return match.group(1)

def get_outputs(_stdout: bytes) -> dict[str, Any]:
    stdout = _stdout.decode('utf-8')

    return {
        'read_time': float(_search(r'File read time \(sec\): ([\d\.]+)', stdout)),
        'compute_time': float(_search(r'Computation time \(sec\): ([\d\.]+)', stdout)),
        'weight': int(_search(r'Total weight: (-?\d+)', stdout)),
    }

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        speedups = []
        n_wrong = 0
        for (test, metrics) in all_metrics[impl].items():
            print(f'  {test}:')

            expected = metrics['expected_weight']
            if metrics['weight'] != expected:
                print(f'    Wrong result on this test: weight {metrics["weight"]}, networkx says {expected}')
                n_wrong += 1

            compute_time = metrics['compute_time']
            print(f'    Compute time = {compute_time:0.4f}s, Read time = {metrics["read_time"]:0.4f}s')

            if test in all_metrics[baseline]:
                base_time = all_metrics[baseline][test]['compute_time']
                speedup = base_time / compute_time if compute_time > 0 else float('inf')
                speedups.append(speedup)
                print(f'    Compute speedup over {baseline} = {speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average computation time speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print(f'Tests where {impl} disagrees with networkx: {n_wrong}/{len(all_metrics[impl])}')
        print()

if __name__ == '__main__':
    import argparse
    import os
    import subprocess
    import sys

    import nx_utils
    from graph_loader import load_graph

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Compare the cycle-detection trackers of kruskal.py')
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for edge weights',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    # Location to store on-the-fly generated graphs
    TEMPFILE_DIR = '/tmp/mst_test/'
    os.makedirs(TEMPFILE_DIR, exist_ok=True)
    TEMPFILE_PATH = os.path.join(TEMPFILE_DIR, 'test.txt')

    KRUSKAL = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'kruskal.py')

    def create_arb_weight_test(g_fxn: Callable[..., nx.classes.graph.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], None]:
        def inner():
            g = g_fxn(*g_args)
            nx_utils.to_output_file(g,
                                    nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                    TEMPFILE_PATH,
                                    nodename_to_idx=nodename_to_idx)

        return inner

    # Which tracker is the one being benchmarked against
    BASELINE = 'union-find'

    impls = [BASELINE, 'pairs']

    tests = {
        '2-degree Circulant n=200':
            create_arb_weight_test(nx.circulant_graph, (200, [1, 2])),

        'Hypercube d=7, n=128':
            create_arb_weight_test(nx.hypercube_graph,
                                   (7,),
                                   lambda node: sum(node[-i-1]* 2**i for i in range(len(node))),
            ),

        'Connected Caveman Graph, 20 groups of size k=10, n=200':
            create_arb_weight_test(nx.connected_caveman_graph, (20, 10)),

        'Binomial Graph, p=0.05 n=200':
            create_arb_weight_test(nx.fast_gnp_random_graph, (200, 0.05, args.seed)),
    }

    all_metrics = {
        impl: {} for impl in impls
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        test_gen()

        selector = load_graph(TEMPFILE_PATH)
        (_, expected_weight) = nx_utils.reference_mst(selector.edges, selector.n_verts)

        for impl in impls:
            print(f'  Running {impl} tracker on test "{test_name}"...')

            proc_output = subprocess.run([sys.executable, KRUSKAL, TEMPFILE_PATH, '-q', '-t', impl],
                                         capture_output=True)
            if proc_output.returncode != 0:
                print(f'!!! Error on {impl}: kruskal exited with {proc_output.returncode}')
                print(proc_output.stderr.decode('utf-8'))
                continue

            metrics = get_outputs(proc_output.stdout)
            metrics['expected_weight'] = expected_weight

            all_metrics[impl][test_name] = metrics

            print('   ', metrics)
            print()
        print()

    print_stats(all_metrics, BASELINE)
