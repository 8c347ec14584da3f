"""Omzet (revenue) reporting for merchants and their outlets.

Transactions are stored per outlet and aggregated per calendar day. Two
reports are exposed: a monthly listing of the days that had activity, and a
date-complete daily series over an arbitrary range where days without
activity are reported as "0". Both responses carry pagination info and
navigation links."""
