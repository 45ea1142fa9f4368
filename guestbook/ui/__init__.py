"""Guest book UI: coordinators, viewmodels and the Textual shell."""
