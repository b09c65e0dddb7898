from . import demo_bfs
from . import demo_round_robin

if __name__ == '__main__':
    demo_bfs.main()
    demo_round_robin.main()
