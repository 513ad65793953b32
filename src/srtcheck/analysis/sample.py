"""Built-in sample document: seven back-to-back entries with no overlaps."""

SAMPLE_SRT = """1
00:00:02,480 --> 00:00:02,980
Okay.

2
00:00:03,120 --> 00:00:09,519
So we're going to navigate this, to sort of show where where we go with this.

3
00:00:09,519 --> 00:00:09,839
Okay.

4
00:00:09,839 --> 00:00:11,759
So here's a domain that I've got.

5
00:00:11,759 --> 00:00:14,255
It's called Casa de SaaS.

6
00:00:14,255 --> 00:00:14,574
Right?

7
00:00:14,574 --> 00:00:15,554
The house of SaaS."""
