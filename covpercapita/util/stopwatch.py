#!/usr/bin/env python
# -*- coding: utf-8 -*-

import time


class StopWatch(object):
    """Measure wall-clock time of downloading and reporting for log messages.
    """

    def __init__(self):
        self._started = time.perf_counter()

    def stop(self):
        """float: seconds since the stopwatch was created
        """
        return time.perf_counter() - self._started

    @staticmethod
    def show(time_sec):
        """Format seconds, like '1 min 30 sec' or '12 sec'.

        Args:
            time_sec (int or float): seconds

        Returns:
            str: formatted time
        """
        minutes, seconds = divmod(round(time_sec), 60)
        return f"{minutes} min {seconds} sec" if minutes else f"{seconds} sec"

    def stop_show(self):
        """str: formatted seconds since the stopwatch was created
        """
        return self.show(self.stop())
