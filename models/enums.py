"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("fcfs", not "SchedulingPolicy.FCFS")
- They work as FastAPI request fields and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"    # First Come First Served: arrival order
    SJF = "sjf"      # Shortest Job First: total burst time, non-preemptive
    PSJF = "psjf"    # Preemptive SJF: shortest remaining time
    PRI = "pri"      # Static priority, non-preemptive (lower value = more urgent)
    PPRI = "ppri"    # Preemptive priority
    RR = "rr"        # Round Robin: FIFO rotation on quantum expiry


class JobState(str, enum.Enum):
    WAITING = "WAITING"    # sitting in the ready queue
    RUNNING = "RUNNING"    # occupying exactly one core
    FINISHED = "FINISHED"  # completed, statistics recorded


class CoreStatus(str, enum.Enum):
    IDLE = "IDLE"
    BUSY = "BUSY"
