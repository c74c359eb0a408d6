"""Application errors and the HTTP responses they map to."""