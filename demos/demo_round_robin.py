from queuekit import *

def run_demo(jobs=None, quantum=3):
    """ Round robin scheduling, each job needs some units of work """

    if jobs is None:
        jobs = {'editor': 4, 'compiler': 7, 'shell': 2}
    ready = Queue(jobs.items())
    finished = []
    while ready:
        name, left = ready.dequeue()
        left -= quantum
        if left > 0:
            ready.enqueue((name, left))
        else:
            finished.append(name)
        print(f'ran {name}: {ready!r}')
    return finished

def main():
    print('Finished in order: ', run_demo())

if __name__ == '__main__':
    main()
