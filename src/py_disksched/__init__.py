"""py-disksched — a disk scheduling simulator.

Compare how FCFS, SSTF, SCAN and C-SCAN order a queue of cylinder
requests, and how far the disk head travels under each.
"""
