#!/usr/bin/env python
import logging
import re
from typing import Union

import icalendar

from caldavclient.lib.python_utilities import to_normal_str

log = logging.getLogger("caldavclient")

## Global counter.  We don't want to be too verbose on the users
fixup_error_loggings = 0


def fix(event: Union[str, bytes]) -> str:
    """This function receives some ical as it's given from the server,
    checks for breakages with the standard, and attempts to fix up
    known issues:

    1) COMPLETED MUST be a datetime in UTC according to the RFC, but
    sometimes a date is given.

    2) CREATED timestamps at the end of year 0 makes no sense and
    is changed to the epoch.

    3) Trailing white space on content lines causes trouble and is
    removed, except where the line is folded and the blank belongs to
    the value.

    4) Blank lines are not allowed inside an iCalendar object and are
    removed.
    """
    event = to_normal_str(event)
    if not event.endswith("\n"):
        event = event + "\n"

    ## 1) Add an arbitrary time if completed is given as date
    fixed = re.sub(
        r"^COMPLETED(?:;VALUE=DATE)?:(\d+)\s*$",
        r"COMPLETED:\g<1>T120000Z",
        event,
        flags=re.MULTILINE,
    )

    ## 2) CREATED timestamps prior to epoch does not make sense
    fixed = fixed.replace("CREATED:00001231T000000Z", "CREATED:19700101T000000Z")

    ## 3) trailing whitespace.  Whitespace before a fold (a line followed
    ## by a continuation line starting with a blank) is content.
    fixed = re.sub(r"[ \t]+$(?!\n[ \t])", "", fixed, flags=re.MULTILINE)

    ## 4) blank lines
    fixed = "\n".join(line for line in fixed.strip().split("\n") if line) + "\n"

    if fixed != event:
        ## rate limiting, the warning is only given on powers of two
        global fixup_error_loggings
        fixup_error_loggings += 1
        is_power_of_two = not (fixup_error_loggings & (fixup_error_loggings - 1))
        _log = log.warning if is_power_of_two else log.debug
        _log(
            "Ical data was modified to avoid compatibility issues "
            "(your calendar server breaks the icalendar standard).  "
            f"Error count: {fixup_error_loggings} - this warning is ratelimited"
        )

    return fixed


def read(data: Union[str, bytes], forgiving: bool = True) -> icalendar.Calendar:
    """
    Parse iCalendar data into an icalendar.Calendar.

    With forgiving set, known breakages are fixed up first (see
    fix()).  icalendar itself will tolerate broken properties inside
    events, todos and journals and record them in the errors attribute
    of the component rather than raising.  Data that can't be parsed
    at all raises ValueError.
    """
    data = fix(data) if forgiving else to_normal_str(data)
    return icalendar.Calendar.from_ical(data)
