schedule_lab_description = """
Generate a laboratory analysis schedule from a batch of samples, technicians and equipment

### Request Body

The API endpoint takes a `LabData` object with the following lists:

- `samples`: List of `Sample` objects, which contain the following information:
    - `id`: Sample identifier
    - `type`: Sample medium (`BLOOD`, `URINE`, `TISSUE`)
    - `priority`: Urgency class (`STAT`, `URGENT`, `ROUTINE`)
    - `analysisType`: Name of the analysis; must map to a specialty (e.g. "Complete Blood Count", "PCR")
    - `analysisTime`: Nominal analysis duration in minutes
    - `arrivalTime`: Arrival time at the lab, `HH:MM`
    - `patientInfo`: Patient context (optional, not used for scheduling)

- `technicians`: List of `Technician` objects, which contain the following information:
    - `id`: Technician identifier
    - `name`: Name of the technician
    - `specialty`: List of specialties (`BLOOD`, `CHEMISTRY`, `MICROBIOLOGY`, `IMMUNOLOGY`, `GENETICS`)
    - `efficiency`: Speed multiplier; real duration = nominal duration / efficiency
    - `startTime`, `endTime`: Shift bounds, `HH:MM`
    - `lunchBreak`: `HH:MM-HH:MM`, or empty

- `equipment`: List of `Equipment` objects, which contain the following information:
    - `id`: Equipment identifier
    - `name`: Name of the equipment
    - `type`: Specialty served by the unit
    - `compatibleTypes`: Informational list of analysis labels
    - `capacity`: Informational; each unit runs one sample at a time
    - `maintenanceWindow`: `HH:MM-HH:MM`, or empty
    - `cleaningTime`: Minutes the unit stays unavailable after each sample

### Query Parameters

- `strict` (default `true`): if any sample's analysis type has no specialty mapping, the request fails
  with 422. With `strict=false` such samples are reported in `unscheduled` instead.

### Scheduling Rules

1. Samples are processed by urgency (`STAT` → `URGENT` → `ROUTINE`), then by arrival time.
2. Each sample goes to the first equipment unit of its specialty and to the compatible technician
   who can finish it earliest (ties go to the lowest technician id).
3. A sample starts no earlier than its arrival, the technician's availability (shift start if idle)
   and the unit's availability (previous end + cleaning time).
4. A run overlapping the unit's maintenance window is moved after it; a run overlapping the
   technician's lunch break is then moved after the break.
5. Runs that would end after the technician's shift are not allowed.

### Response

- `schedule`: List of entries with `sampleId`, `priority`, `technicianId`, `equipmentId`,
  `startTime`, `endTime`, `duration`, `analysisType`, `efficiency`
- `metrics`: `totalTime` (makespan in minutes), `efficiency` (analysis minutes / makespan, %),
  `conflicts` (number of unscheduled samples)
- `unscheduled`: Samples that could not be placed, with `reason` and `message`

### Errors

- `400`: malformed times, duplicate ids, shifts that end before they start
- `422`: unmapped analysis type (strict mode)
"""
