#!/usr/bin/env python3

"""
Machine Driver

Ties the CPU and Memory to the host's input and rendering plugins, and keeps
the two clocks of the system running:

    * the instruction clock - a batch of instructions is run every frame,
      sized so the CPU averages the requested clock speed
    * the 60Hz frame clock - inputs are polled, the timers are counted down
      and the framebuffer is sent to the renderer

If the host falls behind, the timers are ticked once for every 60Hz boundary
that has passed, so they never run slow.  Rendering and input polling only
happen once per loop, as there's no point drawing frames nobody will see.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ

FRAME_INTERVAL = 1.0 / TIMER_FREQ


class MachineError(Exception):
    pass


class Machine:
    def __init__(self, memory, cpu, renderer, inputs, clock_speed=None):
        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        if clock_speed <= 0:
            raise MachineError("Clock speed must be a positive number of operations per second")

        self.memory = memory
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.cycles_per_frame = clock_speed / TIMER_FREQ
        self.cycle_remainder = 0.0  # Fractional instructions carried into the next frame

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def step_frame(self, ticks=1):
        # Runs one frame's worth of work without waiting.  Returns False if the host wants to quit.
        if not self.inputs.update_keys(self.memory.keys):
            return False

        cycles_float = self.cycles_per_frame + self.cycle_remainder
        cycles = int(cycles_float)
        self.cycle_remainder = cycles_float - cycles
        self.cpu.run(self.memory, cycles)
        self.perf_counter_ops += cycles

        for _ in range(ticks):
            self.cpu.tick()

        self.renderer.update_screen(self.memory.video)
        self.perf_counter_fps += 1
        return True

    def run(self, max_frames=None):
        frames = 0
        next_frame_time = perf_counter()

        while max_frames is None or frames < max_frames:
            while perf_counter() < next_frame_time:  # Unfortunately we have to do this to get the timing right
                pass

            this_time = perf_counter()
            ticks = 0

            # Count every frame boundary passed since the last loop, so a lagging host doesn't slow the timers
            while next_frame_time <= this_time:
                next_frame_time += FRAME_INTERVAL
                ticks += 1

            # Reporting the performance should be done before a refresh, as refreshing will likely show the report
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            if not self.step_frame(ticks):
                return

            frames += 1

    def report_perf(self, fps=0, ops=0):
        title = "{} - {} FPS, {} OPS".format(APP_NAME, fps, ops)
        self.renderer.set_title(title)
