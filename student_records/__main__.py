from student_records.cli import main

raise SystemExit(main())
