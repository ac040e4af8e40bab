"""Data models for metadata, metrics, processes, containers, network devices and tags."""