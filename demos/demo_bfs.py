from queuekit import *

GRAPH = {
    'a': ['b', 'c'],
    'b': ['d'],
    'c': ['d', 'e'],
    'd': ['f'],
    'e': ['f'],
    'f': [],
}

def run_demo(start='a', graph=GRAPH):
    """ Breadth first traversal, returning nodes in the order visited """

    frontier = Queue([start])
    visited = []
    while not frontier.is_empty():
        node = frontier.dequeue()
        if node in visited:
            continue
        visited.append(node)
        for neighbour in graph[node]:
            if neighbour not in visited and neighbour not in frontier:
                frontier.enqueue(neighbour)
    return visited

def main():
    print('Breadth first order: ', run_demo())

if __name__ == '__main__':
    main()
