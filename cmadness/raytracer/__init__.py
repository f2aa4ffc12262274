"""Ray tracer: vectors, scene description, rendering and PPM output."""